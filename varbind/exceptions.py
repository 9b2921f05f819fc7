"""Inspector exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class DocumentValidationError(Exception):
    """Raised when a design document snapshot fails validation.

    The loader collects every problem before raising so the CLI can
    report them all at once and map them to exit code 2.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at {error.path}: {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))


class VariableLookupError(Exception):
    """Raised by a variable store when a lookup itself fails."""

    def __init__(self, variable_id: str, reason: str = ""):
        self.variable_id = variable_id
        self.reason = reason
        message = f"Lookup of variable '{variable_id}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
