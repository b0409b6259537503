"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to plain strings.

    YAML 1.1 boolean keys (``true``, ``yes``, ``on`` ...) arrive as Python
    booleans and numeric keys as ints. Both are converted with ``str`` so that
    option lookups see predictable names.

    Args:
        data: Dictionary that may contain non-string keys.

    Returns:
        Dictionary with all keys converted to strings.

    Examples:
        >>> normalize_yaml_dict_keys({True: "a", 8080: "b", "sdkPackage": "c"})
        {'True': 'a', '8080': 'b', 'sdkPackage': 'c'}
    """
    return {str(key): value for key, value in data.items()}
