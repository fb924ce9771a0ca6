"""
Environment variable readers for the Lint AI Code Reviewer.

GitHub Actions exposes workflow inputs both as plain variables and as
``INPUT_<NAME>`` variables, so every reader accepts fallback keys that are
tried in order when the primary key is unset or empty.
"""

import os
from enum import Enum
from typing import List, Optional, Type


def get_env_str(key: str, default: str = "", *fallback_keys: str) -> str:
    """Return the first non-empty value among ``key`` and ``fallback_keys``.

    Args:
        key: Primary environment variable name
        default: Value returned when no key is set
        *fallback_keys: Additional names tried in order

    Returns:
        The stripped variable value or ``default``
    """
    for name in (key,) + fallback_keys:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return default


def get_env_int(key: str, default: int, *fallback_keys: str) -> int:
    """Read an integer, returning ``default`` when unset or not a number."""
    value = get_env_str(key, "", *fallback_keys)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def get_env_float(key: str, default: float, *fallback_keys: str) -> float:
    """Read a float, returning ``default`` when unset or not a number."""
    value = get_env_str(key, "", *fallback_keys)
    if value:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def get_env_bool(key: str, default: bool, *fallback_keys: str) -> bool:
    """Read a boolean; 'true', 'yes' and '1' (any case) are truthy."""
    value = get_env_str(key, "", *fallback_keys)
    if value:
        return value.lower() in ('true', 'yes', '1')
    return default


def get_env_list(key: str, separator: str = ",", *fallback_keys: str) -> List[str]:
    """Read a separated list, dropping blank items."""
    value = get_env_str(key, "", *fallback_keys)
    if value:
        return [item.strip() for item in value.split(separator) if item.strip()]
    return []


def get_env_enum(key: str, enum_class: Type[Enum], default: Enum, *fallback_keys: str) -> Enum:
    """Read an enum member by value or by name, ignoring case.

    Args:
        key: Primary environment variable name
        enum_class: Enum to convert into
        default: Member returned when unset or unrecognised
        *fallback_keys: Additional names tried in order

    Returns:
        The matching enum member or ``default``
    """
    value = get_env_str(key, "", *fallback_keys)
    if not value:
        return default

    lowered = value.lower()
    for member in enum_class:
        if str(member.value).lower() == lowered or member.name.lower() == lowered:
            return member
    return default


def get_env_optional_int(key: str, *fallback_keys: str) -> Optional[int]:
    """Read an integer, returning None when unset or not a number."""
    value = get_env_str(key, "", *fallback_keys)
    if value:
        try:
            return int(value)
        except ValueError:
            return None
    return None
