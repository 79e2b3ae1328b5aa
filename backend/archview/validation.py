from dataclasses import dataclass, field
from typing import List
from .errors import ValidationError, ValidationLevel


@dataclass
class ValidationResult:
    """Outcome of checking a view; problems are reported, never raised."""
    is_valid: bool
    errors: List[ValidationError] = field(default_factory=list)

    @classmethod
    def success(cls):
        return cls(is_valid=True)

    @classmethod
    def from_errors(cls, errors: List[ValidationError]):
        return cls(is_valid=not errors, errors=list(errors))

    def errors_for(self, object_id: str) -> List[ValidationError]:
        return [e for e in self.errors if e.object_id == object_id]

    def at_level(self, level: ValidationLevel) -> List[ValidationError]:
        return [e for e in self.errors if e.level is level]
