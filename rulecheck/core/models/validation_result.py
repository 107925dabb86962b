"""
ValidationResult model representing the outcome of one validation run (ephemeral).
"""

from typing import Dict

from pydantic import BaseModel, Field, field_validator


class ValidationError(ValueError):
    """Raised by ValidationResult.raise_for_errors() when a run failed."""

    def __init__(self, messages: Dict[str, str]):
        self.messages = dict(messages)
        detail = "; ".join(f"{field}: {message}" for field, message in sorted(self.messages.items()))
        super().__init__(f"Validation failed for {len(self.messages)} field(s): {detail}")


class ValidationResult(BaseModel):
    """
    Outcome of validating a set of submitted field values.

    Note: ValidationResult is ephemeral and only lives for the request
    that produced it.

    Attributes:
        passed: Overall validation status (True when no field failed)
        messages: Field name -> the single message of the last failing rule
    """

    passed: bool
    messages: Dict[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("messages")
    @classmethod
    def check_passed_consistency(cls, v, info):
        """Validate that passed is True exactly when messages is empty."""
        passed = info.data.get("passed")
        if passed and len(v) > 0:
            raise ValueError("passed=True but messages is not empty")
        if passed is False and len(v) == 0:
            raise ValueError("passed=False but messages is empty")
        return v

    def __bool__(self) -> bool:
        return self.passed

    def raise_for_errors(self) -> None:
        """
        Raise if the run failed.

        Raises:
            ValidationError: Carrying the per-field messages
        """
        if not self.passed:
            raise ValidationError(self.messages)

    class Config:
        json_schema_extra = {
            "example": {
                "passed": False,
                "messages": {
                    "name": "The name may only contain letters.",
                    "age": "The age must be greater than 0.",
                },
            }
        }
