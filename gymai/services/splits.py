"""
Weekly split definitions: which muscle groups each training day covers.
"""
from types import MappingProxyType
from typing import Mapping

from gymai.models.exercise import SplitType

SplitTable = Mapping[SplitType, Mapping[str, tuple[str, ...]]]

# Day-keys are ordered; a day index selects day-key (index mod day count)
SPLITS: SplitTable = MappingProxyType({
    SplitType.PUSH_PULL_LEGS: MappingProxyType({
        "push": ("chest", "shoulders", "triceps"),
        "pull": ("back", "biceps"),
        "legs": ("legs", "core"),
    }),
    SplitType.UPPER_LOWER: MappingProxyType({
        "upper": ("chest", "back", "shoulders", "biceps", "triceps"),
        "lower": ("legs", "core"),
    }),
    SplitType.FULL_BODY: MappingProxyType({
        "full": ("chest", "back", "shoulders", "legs", "biceps", "triceps", "core"),
    }),
})


def split_day_names(split_type: SplitType | str, splits: SplitTable = SPLITS) -> list[str]:
    """Ordered day-keys of a split."""
    return list(splits[SplitType(split_type)])


def day_muscle_groups(
    split_type: SplitType | str,
    day_index: int,
    splits: SplitTable = SPLITS,
) -> list[str]:
    """
    Muscle groups trained on a given day of a split.

    Any day index is valid; it wraps around the split's day count.
    """
    days = splits[SplitType(split_type)]
    keys = list(days)
    key = keys[day_index % len(keys)]
    return list(days[key])
