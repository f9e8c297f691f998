"""
Core building blocks: typed names, the error taxonomy, input validation,
the chi-squared decision layer, result records and the engine base class.
"""
