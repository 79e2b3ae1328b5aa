# Element graph: typed elements, relationships and the in-memory model.

from archview.model.elements import (
    Component,
    Container,
    Element,
    ElementKind,
    Person,
    Relationship,
    SoftwareSystem,
)
from archview.model.model import Model

__all__ = [
    "Component",
    "Container",
    "Element",
    "ElementKind",
    "Model",
    "Person",
    "Relationship",
    "SoftwareSystem",
]
