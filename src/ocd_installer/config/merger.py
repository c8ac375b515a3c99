"""
Configuration merging helpers.

Supports ``+key`` / ``-key`` list operations so a user file can extend or
trim a default list (e.g. the package managers probed on System Info).
"""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge ``override`` into a copy of ``base``.

    Merge rules:
    - Scalars and plain lists: override replaces base
    - Dicts: merged recursively
    - ``+name`` list: items appended to ``name`` (duplicates skipped)
    - ``-name`` list: items removed from ``name``
    - ``None``: key removed

    Examples:
        >>> deep_merge({"package_managers": ["bun"]}, {"+package_managers": ["yarn"]})
        {'package_managers': ['bun', 'yarn']}
    """
    result = dict(base)

    for key, value in override.items():
        if key[:1] in ("+", "-") and isinstance(value, list):
            name = key[1:]
            current = result.get(name)
            if key[0] == "+":
                if isinstance(current, list):
                    result[name] = current + [item for item in value if item not in current]
                else:
                    result[name] = list(value)
            elif isinstance(current, list):
                result[name] = [item for item in current if item not in value]
        elif value is None:
            result.pop(key, None)
        elif isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def get_nested_value(config: dict[str, Any], key_path: str) -> Any:
    """Get the value at a dot-separated path, or None if any part is missing."""
    current: Any = config
    for key in key_path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def set_nested_value(config: dict[str, Any], key_path: str, value: Any) -> dict[str, Any]:
    """
    Set the value at a dot-separated path, creating intermediate dicts.

    Examples:
        >>> set_nested_value({}, "timing.check_delay", 0.5)
        {'timing': {'check_delay': 0.5}}
    """
    *parents, leaf = key_path.split(".")
    current = config
    for key in parents:
        if not isinstance(current.get(key), dict):
            current[key] = {}
        current = current[key]
    current[leaf] = value
    return config
