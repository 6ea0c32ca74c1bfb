import logging
from typing import Dict, Iterable, List

import pandas as pd

from edi384.models.segment_dictionary import SegmentDictionary

logger = logging.getLogger(__name__)


class EligibilityExporter:
    """Export parsed eligibility rows to a pandas DataFrame, one row per record"""

    @staticmethod
    def rows_to_dataframe(rows: Iterable[List[str]], row_keys: List[str]) -> pd.DataFrame:
        # Build by columns to avoid a list-of-dicts copy
        data_cols: Dict[str, List[str]] = {col: [] for col in row_keys}

        for row in rows:
            if len(row) != len(row_keys):
                raise ValueError(f"Row has {len(row)} values, expected {len(row_keys)}")
            for col, value in zip(row_keys, row):
                data_cols[col].append(value)

        return pd.DataFrame(data_cols, columns=row_keys)

    @staticmethod
    def export_to_csv(df: pd.DataFrame, output_path: str, na_rep: str = '') -> None:
        df.to_csv(output_path, index=False, na_rep=na_rep)
        logger.info("Exported %d records to %s", len(df), output_path)

    @staticmethod
    def get_column_info(dictionary: SegmentDictionary) -> Dict[str, str]:
        """Describe every output column: segment, occurrence and field size."""
        info = {}
        for key, definition in dictionary.items():
            for n, column in enumerate(definition.column_keys(), start=1):
                if definition.occurs == 1:
                    info[column] = f"{key} segment ({definition.size} chars)"
                else:
                    info[column] = f"{key} occurrence {n} of {definition.occurs} ({definition.size} chars)"
        return info
