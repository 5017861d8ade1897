"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI:
- JSON and YAML for machine consumption
- Plain text for people
"""

import json
from typing import Any, Dict, List

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip()
    elif format_type == "text":
        return format_text_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_text_output(data: Any) -> str:
    """Format data as plain text lines."""
    if isinstance(data, dict):
        return "\n".join(_format_text_items(data))
    if isinstance(data, list):
        return "\n".join(str(item) for item in data)
    return str(data)


def _format_text_items(data: Dict[str, Any], indent: int = 0) -> List[str]:
    lines = []
    prefix = "  " * indent
    for key, value in data.items():
        if isinstance(value, dict):
            lines.append(f"{prefix}{key}:")
            lines.extend(_format_text_items(value, indent + 1))
        elif isinstance(value, list):
            lines.append(f"{prefix}{key}:")
            lines.extend(f"{prefix}  - {item}" for item in value)
        else:
            lines.append(f"{prefix}{key}: {value}")
    return lines
