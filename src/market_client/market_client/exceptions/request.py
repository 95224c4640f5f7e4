# ABOUTME: Request-specific exception classes raised before an outbound call
# ABOUTME: Aggregates every field-level validation issue of a request into one failure

from typing import Iterable, List

from market_client.exceptions.base import ValidationException
from market_client.validators.validation_result import ValidationIssue


class RequestValidationError(ValidationException):
    """Exception raised when request parameters are inconsistent.

    Carries the complete, ordered list of field-level issues found by the
    request's validation checks, not just the first one. A caller can fix the
    offending fields and validate the same request again.

    Attributes:
        issues: Ordered field-level validation issues.
    """

    DEFAULT_CODE = "REQUEST_VALIDATION_FAILED"

    def __init__(self, issues: Iterable[ValidationIssue], message: str | None = None):
        self.issues: List[ValidationIssue] = list(issues)
        if message is None:
            message = self._format_message(self.issues)
        super().__init__(
            message,
            code=self.DEFAULT_CODE,
            details={"fields": self.field_names, "count": len(self.issues)},
        )

    @property
    def field_names(self) -> List[str]:
        """Names of the offending fields, in the order the issues were found."""
        return [issue.field_path for issue in self.issues if issue.field_path is not None]

    def __len__(self) -> int:
        return len(self.issues)

    @staticmethod
    def _format_message(issues: List[ValidationIssue]) -> str:
        if not issues:
            return "Request validation failed."
        lines = [f"Request validation failed with {len(issues)} error(s):"]
        lines.extend(f"  {issue.field_path}: {issue.message}" for issue in issues)
        return "\n".join(lines)
