"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any

# ${VAR:default}, ${VAR} or $VAR
_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in strings, dicts and lists.

    Variables without a value and without a default are left untouched.
    Non-string leaves are returned unchanged.

    Args:
        value: Configuration value to expand

    Returns:
        Expanded value of the same shape
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(v) for v in value]
    return value


def _replace(match: "re.Match[str]") -> str:
    braced_name, default, bare_name = match.groups()
    name = braced_name or bare_name
    if name in os.environ:
        return os.environ[name]
    if default is not None:
        return default
    return match.group(0)
