"""
Utility functions for the KVParse package.

This module provides output helpers shared by the command-line interface.
"""

import json
from typing import Any

import yaml

from KVParse.utils.logging import get_logger

logger = get_logger(__name__)


def format_json(data: Any, indent: int = 2, sort_keys: bool = False) -> str:
    """
    Format data as a JSON string.

    Args:
        data: The data to format as JSON
        indent: Number of spaces for indentation (default: 2)
        sort_keys: Whether to sort dictionary keys (default: False)

    Returns:
        A formatted JSON string

    Example:
        >>> print(format_json({'seed': ['42']}))
        {
          "seed": [
            "42"
          ]
        }
    """
    return json.dumps(
        data,
        indent=indent,
        ensure_ascii=False,
        sort_keys=sort_keys,
        default=str  # Handle non-serializable types
    )


def format_yaml(data: Any) -> str:
    """Format data as block-style YAML, keeping key order."""
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
