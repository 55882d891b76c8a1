"""Recursive control counting over the normalized group tree."""

from __future__ import annotations

from ..models.catalog import Group


def count_controls(group: Group) -> int:
    """Count controls in a group, including every nested subgroup."""
    count = len(group.controls)
    for subgroup in group.groups:
        count += count_controls(subgroup)
    return count
