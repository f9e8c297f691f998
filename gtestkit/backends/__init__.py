"""
Adapters that turn external tabular data into G-test inputs.

Available backends:
- `polars`: cross-tabulation of Polars DataFrames
"""
