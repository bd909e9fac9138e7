"""
Equipment inventory to exercise-equipment tag mapping.
"""
from types import MappingProxyType
from typing import Iterable, Mapping

from gymai.models.exercise import Exercise

BODYWEIGHT = "bodyweight"

# Equipment names as entered in onboarding -> equipment_required tags
EQUIPMENT_MAP: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "barbell": ("barbell",),
    "dumbbells": ("dumbbells",),
    "cables": ("cables",),
    "machines": ("machines",),
    "bodyweight": ("bodyweight",),
    "bands": ("bands",),
    "kettlebell": ("kettlebell",),
})


def available_equipment_tags(
    user_equipment: Iterable[str],
    equipment_map: Mapping[str, Iterable[str]] = EQUIPMENT_MAP,
) -> set[str]:
    """
    Resolve a user's equipment names to the tags exercises are filtered on.

    Bodyweight is always available. Names missing from the map are used as
    tags themselves, lower-cased, with no fuzzy matching.
    """
    tags = {BODYWEIGHT}
    for name in user_equipment:
        key = name.lower()
        mapped = equipment_map.get(key)
        if mapped:
            tags.update(tag.lower() for tag in mapped)
        else:
            tags.add(key)
    return tags


def filter_by_equipment(
    exercises: Iterable[Exercise],
    user_equipment: Iterable[str],
    equipment_map: Mapping[str, Iterable[str]] = EQUIPMENT_MAP,
) -> list[Exercise]:
    """Exercises the user can perform, in catalog order."""
    tags = available_equipment_tags(user_equipment, equipment_map)
    return [ex for ex in exercises if ex.equipment_required.lower() in tags]
