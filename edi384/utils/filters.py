from typing import List

import pandas as pd


class EligibilityAnalysisHelper:
    """Helper methods for filtering and analyzing parsed eligibility rows"""

    @staticmethod
    def segment_columns(df: pd.DataFrame, key: str) -> List[str]:
        """Columns holding occurrences of segment `key` (KEY or KEY_1..KEY_n)"""
        return [col for col in df.columns if col == key or col.startswith(f"{key}_")]

    @staticmethod
    def filter_with_segment(df: pd.DataFrame, key: str) -> pd.DataFrame:
        """Keep records containing at least one occurrence of segment `key`"""
        columns = EligibilityAnalysisHelper.segment_columns(df, key)
        if not columns:
            return df.iloc[0:0]
        mask = (df[columns].fillna('') != '').any(axis=1)
        return df[mask]

    @staticmethod
    def filter_by_value(df: pd.DataFrame, column: str, pattern: str) -> pd.DataFrame:
        """Filter by a substring of one column's value (e.g. 'IL' in REF_1)"""
        if column not in df.columns:
            return df.iloc[0:0]
        return df[df[column].astype(str).str.contains(pattern, na=False, regex=False)]

    @staticmethod
    def column_fill_rates(df: pd.DataFrame) -> pd.Series:
        """Share of records with a non-empty value, per column"""
        if df.empty:
            return pd.Series(0.0, index=df.columns)
        return (df.fillna('') != '').mean()

    @staticmethod
    def get_top_values(df: pd.DataFrame, column: str, n: int = 10) -> pd.DataFrame:
        values = df.loc[df[column].fillna('') != '', column]
        counts = values.value_counts().head(n)
        return counts.rename_axis(column).reset_index(name='record_count')

    @staticmethod
    def get_statistics(df: pd.DataFrame) -> dict:
        """Get basic statistics for the dataset"""
        fill_rates = EligibilityAnalysisHelper.column_fill_rates(df)
        return {
            'total_records': len(df),
            'total_columns': len(df.columns),
            'empty_columns': int((fill_rates == 0).sum()),
            'fully_populated_columns': int((fill_rates == 1).sum()) if len(df) else 0,
            'avg_fill_rate': float(fill_rates.mean()) if len(fill_rates) else 0.0,
        }
