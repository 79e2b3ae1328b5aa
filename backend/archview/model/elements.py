from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import uuid


class ElementKind(Enum):
    PERSON = "person"
    SOFTWARE_SYSTEM = "software_system"
    CONTAINER = "container"
    COMPONENT = "component"


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(eq=False)
class Element:
    """
    A node in the architecture model.
    Identity is the id: two records with the same id are the same element.
    """

    name: str = ""
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    id: str = field(default_factory=_new_id)

    kind: Optional[ElementKind] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError(f"{type(self).__name__} name must be non-empty.")
        self.name = self.name.strip()

    def __eq__(self, other):
        if not isinstance(other, Element):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


@dataclass(eq=False)
class Person(Element):
    def __post_init__(self):
        super().__post_init__()
        self.kind = ElementKind.PERSON


@dataclass(eq=False)
class SoftwareSystem(Element):
    def __post_init__(self):
        super().__post_init__()
        self.kind = ElementKind.SOFTWARE_SYSTEM


@dataclass(eq=False)
class Container(Element):
    software_system_id: str = ""
    technology: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.software_system_id:
            raise ValueError("Container must reference its software system.")
        self.kind = ElementKind.CONTAINER


@dataclass(eq=False)
class Component(Element):
    container_id: str = ""
    technology: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if not self.container_id:
            raise ValueError("Component must reference its container.")
        self.kind = ElementKind.COMPONENT


@dataclass(eq=False)
class Relationship:
    """A directed edge between two elements, by id."""

    source_id: str
    destination_id: str
    description: str = ""
    technology: Optional[str] = None
    id: str = field(default_factory=_new_id)

    def __post_init__(self):
        if self.source_id == self.destination_id:
            raise ValueError("Relationship source and destination must differ.")

    def __eq__(self, other):
        if not isinstance(other, Relationship):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def touches(self, element_id: str) -> bool:
        return element_id in (self.source_id, self.destination_id)
