"""Environment variable utilities.

Helpers for reading configuration flags and values from the environment
with a default when the variable is unset.
"""

import os
from typing import Optional


def parse_bool_env(key: str, default: bool = False) -> bool:
    """Parse a boolean value from an environment variable.

    Args:
        key: The environment variable name.
        default: Default value if the environment variable is not set.

    Returns:
        True if the value is 'true', '1' or 'yes' (case-insensitive),
        False otherwise. Returns the default if the variable is not set.

    Examples:
        >>> os.environ["CONNECTION_REJECT_EMPTY_URL"] = "true"
        >>> parse_bool_env("CONNECTION_REJECT_EMPTY_URL")
        True
        >>> parse_bool_env("UNSET_VAR", default=True)
        True
    """
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes")


def parse_str_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Parse a string value from an environment variable.

    An empty value counts as unset.
    """
    value = os.getenv(key)
    if value is None or value == "":
        return default
    return value
