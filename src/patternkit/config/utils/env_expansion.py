"""Environment variable expansion for configuration values."""

import os
import re
from typing import Any, Dict

# ${VAR:default} - os.path.expandvars does not understand defaults
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    def _replace(match: "re.Match[str]") -> str:
        return os.environ.get(match.group(1), match.group(2))

    value = _DEFAULT_PATTERN.sub(_replace, value)
    return os.path.expandvars(value)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Strings, dictionaries and lists are expanded recursively. Supported forms
    are ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Unknown variables without
    a default are left untouched.

    Args:
        value: Value to expand

    Returns:
        Value with environment variables expanded
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables in a whole configuration dictionary."""
    return expand_env_vars(config)
