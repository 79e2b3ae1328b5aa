from dataclasses import dataclass
from enum import Enum


class ValidationLevel(str, Enum):
    """Which part of a view a problem was found in."""
    VIEW = "view"
    ELEMENT = "element"
    RELATIONSHIP = "relationship"


@dataclass
class ValidationError:
    level: ValidationLevel
    message: str
    object_id: str  # element, relationship or view key

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "message": self.message,
            "object_id": self.object_id,
        }
