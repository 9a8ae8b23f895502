"""
Key lookups over string-valued mappings.

Useful for reverse lookups such as finding which registered prefixes can
compact a given IRI. Results keep the mapping's insertion order.
"""

from __future__ import annotations

from typing import Any, Hashable, Mapping


def entries(mapping: Mapping[Hashable, Any]) -> tuple[tuple[Hashable, Any], ...]:
    """The mapping as a tuple of (key, value) pairs."""
    return tuple(mapping.items())


def find_keys_for_values_matching(
    find: str,
    mapping: Mapping[Hashable, Any],
) -> tuple[Hashable, ...]:
    """
    Keys whose value equals `find`.

        find_keys_for_values_matching("needle", {
            "red": "needle", "green": "foo", "purple": "needle",
        })  # ('red', 'purple')
    """
    return tuple(key for key, value in entries(mapping) if value == find)


def find_keys_for_values_prefixing(
    text: str,
    mapping: Mapping[Hashable, Any],
) -> tuple[Hashable, ...]:
    """
    Keys whose value is a prefix of `text`.

    Non-string values never match; the empty string prefixes everything.

        find_keys_for_values_prefixing("food", {
            "red": "", "green": "foo", "blue": "bar", "purple": "food",
        })  # ('red', 'green', 'purple')
    """
    return tuple(
        key for key, value in entries(mapping)
        if isinstance(value, str) and text.startswith(value)
    )
