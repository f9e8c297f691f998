"""Summaries of G-test results as Polars tables."""

from gtestkit.reporting.summary import ResultReporter

__all__ = ["ResultReporter"]
