"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to string keys.

    YAML 1.1 boolean keys (true, false, yes, no, on, off) arrive as Python
    True/False. They are converted to "True"/"False" and every other key is
    passed through ``str``.

    Args:
        data: Dictionary that may contain boolean or other non-string keys.

    Returns:
        Dictionary with all keys converted to strings.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, "validate_source": False})
        {'True': 1, 'validate_source': False}
    """
    normalized = {}
    for key, value in data.items():
        if isinstance(key, bool):
            key = str(key)
        normalized[str(key)] = value
    return normalized
