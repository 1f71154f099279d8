from __future__ import annotations

import math
from typing import Optional, Protocol, Sequence

from splitshare.errors import (
    EmptySplitSet,
    InvalidAmount,
    NegativeSplitAmount,
    PercentageSumMismatch,
    SplitMismatch,
    SplitSumMismatch,
    UnknownSplitType,
)
from splitshare.models import Split, SplitType, User

DEFAULT_TOLERANCE = 1e-4


class SplitStrategy(Protocol):
    def validate(self, splits: Optional[Sequence[Split]], total: float) -> Sequence[Split]: ...


def require_amount(amount: float) -> float:
    if not math.isfinite(amount) or amount < 0:
        raise InvalidAmount(f"amount must be a finite, non-negative number: {amount}")
    return amount


def _require_splits(splits: Optional[Sequence[Split]], total: float) -> Sequence[Split]:
    require_amount(total)
    if not splits:
        raise EmptySplitSet("at least one split is required")
    for split in splits:
        if not math.isfinite(split.amount):
            raise InvalidAmount(f"split for {split.user.user_id} is not a finite number: {split.amount}")
        if split.amount < 0:
            raise NegativeSplitAmount(f"split for {split.user.user_id} is negative: {split.amount}")
    return splits


class EqualSplit:
    def __init__(self, tolerance: float = DEFAULT_TOLERANCE) -> None:
        self.tolerance = tolerance

    def validate(self, splits: Optional[Sequence[Split]], total: float) -> Sequence[Split]:
        splits = _require_splits(splits, total)
        expected = total / len(splits)
        for split in splits:
            if abs(split.amount - expected) > self.tolerance:
                raise SplitMismatch(
                    f"equal share for {split.user.user_id} should be {expected}, got {split.amount}"
                )
        return splits


class ExactSplit:
    def __init__(self, tolerance: float = DEFAULT_TOLERANCE) -> None:
        self.tolerance = tolerance

    def validate(self, splits: Optional[Sequence[Split]], total: float) -> Sequence[Split]:
        splits = _require_splits(splits, total)
        subtotal = sum(split.amount for split in splits)
        if abs(subtotal - total) > self.tolerance:
            raise SplitSumMismatch(f"split amounts sum to {subtotal}, expected {total}")
        return splits


class PercentageSplit:
    # Values are percentages here; conversion to amounts is done by the expense engine.
    def __init__(self, tolerance: float = DEFAULT_TOLERANCE) -> None:
        self.tolerance = tolerance

    def validate(self, splits: Optional[Sequence[Split]], total: float) -> Sequence[Split]:
        splits = _require_splits(splits, total)
        percent = sum(split.amount for split in splits)
        if abs(percent - 100.0) > self.tolerance:
            raise PercentageSumMismatch(f"percentages sum to {percent}, expected 100")
        return splits


STRATEGIES: dict[SplitType, type[SplitStrategy]] = {
    SplitType.EQUAL: EqualSplit,
    SplitType.EXACT: ExactSplit,
    SplitType.PERCENTAGE: PercentageSplit,
}


def resolve_split_type(value: SplitType | str) -> SplitType:
    if isinstance(value, SplitType):
        return value
    if isinstance(value, str):
        key = value.strip()
        try:
            return SplitType[key.upper()]
        except KeyError:
            pass
        try:
            return SplitType(key.lower())
        except ValueError:
            pass
    raise UnknownSplitType(f"unknown split type: {value!r}")


def get_split_strategy(split_type: SplitType | str, tolerance: float = DEFAULT_TOLERANCE) -> SplitStrategy:
    resolved = resolve_split_type(split_type)
    strategy_cls = STRATEGIES.get(resolved)
    if strategy_cls is None:
        raise UnknownSplitType(f"no strategy registered for {resolved.name}")
    return strategy_cls(tolerance)


def equal_splits(users: Sequence[User], total: float) -> list[Split]:
    """Pre-compute the share each user owes for an EQUAL expense."""
    if not users:
        raise EmptySplitSet("at least one participant is required")
    share = total / len(users)
    return [Split(user=user, amount=share) for user in users]
