"""Utility functions for SgolayKit package."""

from .validate import (
    SavGolDomainError,
    validate_offset,
    validate_window_params,
)

__all__ = [
    "SavGolDomainError",
    "validate_offset",
    "validate_window_params",
]
