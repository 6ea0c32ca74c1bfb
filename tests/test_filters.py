import pandas as pd
import pytest
from edi384.utils.filters import EligibilityAnalysisHelper


class TestEligibilityAnalysisHelper:
    @pytest.fixture
    def df(self):
        return pd.DataFrame({
            "INS": ["Y*18", "N*01", "Y*18"],
            "REF_1": ["0F", "", "1L"],
            "REF_2": ["", "", "0F"],
            "AMT": ["", "", ""],
        })

    def test_segment_columns(self, df):
        assert EligibilityAnalysisHelper.segment_columns(df, "REF") == ["REF_1", "REF_2"]
        assert EligibilityAnalysisHelper.segment_columns(df, "INS") == ["INS"]

    def test_filter_with_segment(self, df):
        result = EligibilityAnalysisHelper.filter_with_segment(df, "REF")
        assert result.index.tolist() == [0, 2]

    def test_filter_with_unknown_segment(self, df):
        assert EligibilityAnalysisHelper.filter_with_segment(df, "NM1").empty

    def test_filter_by_value(self, df):
        result = EligibilityAnalysisHelper.filter_by_value(df, "INS", "Y*")
        assert result.index.tolist() == [0, 2]

    def test_column_fill_rates(self, df):
        rates = EligibilityAnalysisHelper.column_fill_rates(df)

        assert rates["INS"] == 1.0
        assert rates["REF_1"] == pytest.approx(2 / 3)
        assert rates["AMT"] == 0.0

    def test_get_top_values(self, df):
        top = EligibilityAnalysisHelper.get_top_values(df, "INS", n=1)

        assert top.to_dict("records") == [{"INS": "Y*18", "record_count": 2}]

    def test_get_statistics(self, df):
        stats = EligibilityAnalysisHelper.get_statistics(df)

        assert stats["total_records"] == 3
        assert stats["total_columns"] == 4
        assert stats["empty_columns"] == 1
        assert stats["fully_populated_columns"] == 1

    def test_get_statistics_empty(self):
        stats = EligibilityAnalysisHelper.get_statistics(pd.DataFrame(columns=["INS"]))

        assert stats["total_records"] == 0
        assert stats["empty_columns"] == 1
        assert stats["avg_fill_rate"] == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
