"""
archview: component-view composition over an architecture model.

- model: elements, relationships and the in-memory Model.
- view: membership sets, ComponentView and the ViewSet registry.
- schemas: pydantic model definitions and build_model.
"""

from archview.model import (
    Component,
    Container,
    Element,
    ElementKind,
    Model,
    Person,
    Relationship,
    SoftwareSystem,
)
from archview.schemas import ModelDefinition, build_model
from archview.validation import ValidationResult
from archview.view import ComponentView, ViewSet

__all__ = [
    "Component",
    "ComponentView",
    "Container",
    "Element",
    "ElementKind",
    "Model",
    "ModelDefinition",
    "Person",
    "Relationship",
    "SoftwareSystem",
    "ValidationResult",
    "ViewSet",
    "build_model",
]
