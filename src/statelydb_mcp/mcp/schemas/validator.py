"""
Validation of tool arguments against their input schemas.
"""

from dataclasses import dataclass, field
from typing import Any

import jsonschema
from jsonschema import Draft7Validator

from statelydb_mcp.utils.logging import setup_logging

logger = setup_logging(__name__)


@dataclass
class ValidationIssue:
    """A single validation problem."""

    message: str
    path: str
    value: Any = None


@dataclass
class ValidationResult:
    """Result of argument validation."""

    is_valid: bool
    errors: list[ValidationIssue] = field(default_factory=list)

    def error_messages(self) -> list[str]:
        """Human-readable messages, prefixed with the offending field when known."""
        return [e.message if e.path == "root" else f"{e.path}: {e.message}" for e in self.errors]


class SchemaValidator:
    """Draft 7 JSON schema validator for tool schemas and arguments."""

    def validate_schema(self, schema: dict[str, Any]) -> ValidationResult:
        """Check that a tool input schema is itself a valid JSON schema."""
        try:
            Draft7Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            path = ".".join(str(p) for p in e.path) if e.path else "root"
            return ValidationResult(
                is_valid=False,
                errors=[ValidationIssue(f"JSON Schema validation failed: {e.message}", path)]
            )
        return ValidationResult(is_valid=True)

    def validate_data(self, data: Any, schema: dict[str, Any]) -> ValidationResult:
        """Validate data against a schema.

        Args:
            data: Data to validate
            schema: Schema to validate against

        Returns:
            Validation result
        """
        validator = Draft7Validator(schema)
        errors = []

        for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
            error_path = ".".join(str(p) for p in error.path) if error.path else "root"
            errors.append(ValidationIssue(
                message=error.message,
                path=error_path,
                value=error.instance
            ))

        if errors:
            logger.debug(f"Argument validation failed with {len(errors)} errors")

        return ValidationResult(is_valid=not errors, errors=errors)
