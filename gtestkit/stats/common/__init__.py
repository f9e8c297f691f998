"""
gtestkit.stats.common
=====================

Theory-agnostic pieces of the G-test: the log-likelihood-ratio kernel
(`likelihood`).
"""
