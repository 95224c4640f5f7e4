# ABOUTME: Validation result models describing field-level request problems
# ABOUTME: Provides a standard record per failed check plus a summary container

from typing import List, Optional, Dict, Any
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


class ValidationSeverity(str, Enum):
    """Severity of a validation issue."""

    INFO = "info"  # informational, request still usable
    WARNING = "warning"  # suspicious but accepted
    ERROR = "error"  # violates a request rule
    CRITICAL = "critical"  # request can never be sent


class ValidationIssue(BaseModel):
    """Details of a single failed validation check."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    code: str = Field(description="Unique identifier of the failed check")
    severity: ValidationSeverity = Field(default=ValidationSeverity.ERROR, description="Issue severity")
    message: str = Field(description="Human-readable description")
    field_path: Optional[str] = Field(None, description="Name of the offending field")
    actual_value: Optional[Any] = Field(None, description="Value that failed the check")
    suggestion: Optional[str] = Field(None, description="How to fix the problem")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional metadata")

    def __str__(self) -> str:
        if self.field_path:
            return f"{self.field_path}: {self.message}"
        return self.message


class ValidationResult(BaseModel):
    """Outcome of validating one or more models."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    is_valid: bool = Field(default=True, description="Whether validation passed overall")
    issues: List[ValidationIssue] = Field(default_factory=list, description="Issues found")
    validated_models: List[str] = Field(default_factory=list, description="Model types that were validated")

    @classmethod
    def from_issues(cls, issues: List[ValidationIssue], validated_models: List[str] | None = None) -> "ValidationResult":
        """Build a result whose validity is derived from the given issues."""
        result = cls(validated_models=list(validated_models or []))
        for issue in issues:
            result.append(issue)
        return result

    @property
    def has_errors(self) -> bool:
        """Whether any ERROR or CRITICAL issue was recorded."""
        return any(issue.severity in [ValidationSeverity.ERROR, ValidationSeverity.CRITICAL] for issue in self.issues)

    @property
    def error_count(self) -> int:
        return sum(
            1 for issue in self.issues if issue.severity in [ValidationSeverity.ERROR, ValidationSeverity.CRITICAL]
        )

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == ValidationSeverity.WARNING)

    def append(self, issue: ValidationIssue) -> None:
        """Record an existing issue, marking the result invalid for errors."""
        self.issues.append(issue)
        if issue.severity in [ValidationSeverity.ERROR, ValidationSeverity.CRITICAL]:
            self.is_valid = False

    def add_issue(
        self,
        code: str,
        severity: ValidationSeverity,
        message: str,
        field_path: Optional[str] = None,
        actual_value: Optional[Any] = None,
        suggestion: Optional[str] = None,
        **metadata,
    ) -> None:
        """Create and record a validation issue."""
        self.append(
            ValidationIssue(
                code=code,
                severity=severity,
                message=message,
                field_path=field_path,
                actual_value=actual_value,
                suggestion=suggestion,
                metadata=metadata,
            )
        )

    def get_issues_by_severity(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    def get_issues_by_field(self, field_path: str) -> List[ValidationIssue]:
        """Return the issues tagged on the given field, in recorded order."""
        return [issue for issue in self.issues if issue.field_path == field_path]

    def get_summary(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "total_issues": len(self.issues),
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "validated_models": self.validated_models,
        }
