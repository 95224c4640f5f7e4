# ABOUTME: Validators package exporting validation result records
# ABOUTME: Used by request models to report every failed check at once

from .validation_result import ValidationResult, ValidationIssue, ValidationSeverity

__all__ = [
    "ValidationResult",
    "ValidationIssue",
    "ValidationSeverity",
]
