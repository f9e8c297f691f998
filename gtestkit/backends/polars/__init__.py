"""Polars adapters: build count tables from long-format DataFrames."""

from gtestkit.backends.polars.tables import (
    LabelledTable,
    contingency_table,
    paired_counts,
)

__all__ = ["LabelledTable", "contingency_table", "paired_counts"]
