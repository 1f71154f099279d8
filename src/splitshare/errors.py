"""Error kinds raised by the splitshare core."""

from __future__ import annotations


class SplitShareError(Exception):
    pass


class ValidationError(SplitShareError, ValueError):
    """A proposed split was rejected before anything was recorded."""


class EmptySplitSet(ValidationError):
    pass


class SplitMismatch(ValidationError):
    pass


class SplitSumMismatch(ValidationError):
    pass


class PercentageSumMismatch(ValidationError):
    pass


class NegativeSplitAmount(ValidationError):
    pass


class InvalidAmount(ValidationError):
    """An expense total or split value is not a finite, non-negative number."""


class UnknownSplitType(SplitShareError, ValueError):
    pass


class NotFound(SplitShareError, LookupError):
    pass


class DuplicateId(SplitShareError, ValueError):
    pass
