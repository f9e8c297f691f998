"""
gtestkit.api - User-Friendly Facade
===================================

Entry points organised by what an analyst wants to test, using the familiar
vocabulary of categorical data analysis. In terms of design patterns, this is
the facade pattern.

Examples
--------
>>> from gtestkit.api import goodness_of_fit, independence, compare_datasets
>>> goodness_of_fit([3, 1], [423, 133]).rejects(0.05)
False
>>> independence([[10, 15], [30, 40], [60, 90]]).rejects(0.1)
False
>>> compare_datasets([268, 199, 42], [807, 759, 184]).rejects(0.05)
True

Architecture
------------
This facade delegates to the underlying components:
- gtestkit.core: names, errors, validation, the decision layer and result records
- gtestkit.stats.common: the likelihood-ratio kernel
- gtestkit.stats.schemes: the engine of each calling mode
"""

from gtestkit.api.gtest import (
    GTest,
    GTestConfig,
    compare_datasets,
    goodness_of_fit,
    independence,
)

__all__ = [
    "GTest",
    "GTestConfig",
    "compare_datasets",
    "goodness_of_fit",
    "independence",
]
