"""Source-level failures raised while importing or exporting earnings data.

Row-level problems never surface as exceptions; the parser drops those lines.
"""

from __future__ import annotations


class AnalyserError(Exception):
    """Base class for every error raised by ``earnings_analyser``."""


class UnreadableInputError(AnalyserError):
    """The input source could not be read or decoded."""


class WrongInputTypeError(AnalyserError):
    """The input source is not delimited tabular text."""


class EmptyDatasetError(AnalyserError):
    """Parsing finished without a single valid row."""


class NoDataError(AnalyserError):
    """An operation needs an Aggregate but none has been imported."""
