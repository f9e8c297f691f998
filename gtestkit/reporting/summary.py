"""
gtestkit.reporting.summary
==========================

Collect named G-test results and show them as one Polars table.

Examples
--------
>>> from gtestkit.api.gtest import independence, compare_datasets
>>> from gtestkit.reporting.summary import ResultReporter
>>> rep = ResultReporter()
>>> rep.add("survey", independence([[40, 22, 43], [91, 21, 28], [60, 10, 22]]))
>>> rep.add("cohorts", compare_datasets([190, 149], [42, 49]))
>>> rep.frame(alpha=0.05).get_column("reject").to_list()
[True, False]
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import polars as pl

from gtestkit.core.result import TestResult


@dataclass
class ResultReporter:
    """An insertion-ordered collection of named `TestResult` objects."""

    results: Dict[str, TestResult] = field(default_factory=dict)

    _SCHEMA = {
        "name": pl.Utf8,
        "method": pl.Utf8,
        "mode": pl.Utf8,
        "statistic": pl.Float64,
        "df": pl.Int64,
        "p_value": pl.Float64,
    }

    def add(self, name: str, result: TestResult) -> None:
        """Register ``result`` under ``name``, replacing any previous one."""
        self.results[name] = result

    def frame(self, alpha: Optional[float] = None) -> pl.DataFrame:
        """
        One row per result.

        Columns: name, method, mode, statistic, df, p_value, plus a boolean
        ``reject`` column when ``alpha`` is given.
        """
        rows: list[Dict[str, Any]] = [
            {"name": name, **result.as_payload()} for name, result in self.results.items()
        ]
        df = pl.DataFrame(rows, schema=self._SCHEMA)
        if alpha is not None:
            df = df.with_columns(
                pl.Series(
                    "reject",
                    [result.rejects(alpha) for result in self.results.values()],
                    dtype=pl.Boolean,
                )
            )
        return df
