"""
Shared domain types for url-parts.

Enums provide exhaustiveness checking and prevent stringly-typed errors.
"""

from enum import Enum


class OutputFormat(Enum):
    """Rendered output forms."""

    TEXT = "text"
    JSON = "json"
