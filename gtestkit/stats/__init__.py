"""
Statistical methods behind the G-test.

1. **Common** (gtestkit.stats.common):
   The likelihood-ratio kernel. It knows nothing about how a test was
   framed and is shared by every scheme.

2. **Schemes** (gtestkit.stats.schemes):
   The calling modes of the G-test, each applying the common kernel with its
   own validation and degrees-of-freedom policy.

Example:
--------
>>> # Generic kernel
>>> from gtestkit.stats.common.likelihood import g_statistic
>>> g_statistic([5, 5], [5.0, 5.0])
0.0

>>> # Scheme-specific engine
>>> from gtestkit.stats.schemes.contingency import ContingencyTableTest
>>> ContingencyTableTest().degrees_of_freedom([[1, 2], [3, 4]])
1
"""
