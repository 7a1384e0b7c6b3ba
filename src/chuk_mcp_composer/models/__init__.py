"""
Pydantic models for the composer.

This module provides:
- ArrangementConfig: Everything one generation run needs
- Instrumentation: Program numbers for the melodic parts
"""

from chuk_mcp_composer.models.arrangement import (
    ArrangementConfig,
    Instrumentation,
    parse_program,
)

__all__ = [
    "ArrangementConfig",
    "Instrumentation",
    "parse_program",
]
