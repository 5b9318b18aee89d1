"""
Shared utilities module

This module provides common utilities used across the entire application.
All utilities are domain-agnostic and reusable.
"""

# Logging
from .logger import (
    ContextLogger,
    configure_logging,
    get_api_logger,
    get_logger,
    get_service_logger,
)

__all__ = [
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "get_api_logger",
    "get_service_logger",
]
