"""
StaticView - ordered, deduplicated membership of elements in one view.

Relationship membership is derived: a model relationship belongs to the
view when both of its endpoints are member elements and it has not been
removed explicitly.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Set

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
from archview.view.records import ElementView, RelationshipView

logger = logging.getLogger(__name__)


class StaticView(ABC):
    def __init__(
        self,
        model: Model,
        software_system: Optional[SoftwareSystem],
        description: str = "",
        *,
        key: Optional[str] = None,
        title: Optional[str] = None,
    ) -> None:
        self.model = model
        self._software_system = software_system
        self.description = description
        self.key = key
        self.title = title
        self._element_views: Dict[str, ElementView] = {}
        self._removed_relationship_ids: Set[str] = set()

    @property
    def software_system(self) -> Optional[SoftwareSystem]:
        return self._software_system

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def add_all_elements(self) -> None:
        pass

    # -------------------------
    # Typed dispatch
    # -------------------------

    def add(self, element: Optional[Element]) -> bool:
        """Route an element to the add rule for its kind. Returns True if it was added."""
        match element:
            case Person():
                return self.add_person(element)
            case SoftwareSystem():
                return self.add_software_system(element)
            case Container():
                return self.add_container(element)
            case Component():
                return self.add_component(element)
            case _:
                logger.debug(
                    "ignoring unsupported element %r",
                    element,
                    extra={"view_key": self.key},
                )
                return False

    def add_person(self, person: Optional[Person]) -> bool:
        return self.add_element(person, True)

    def add_software_system(self, software_system: Optional[SoftwareSystem]) -> bool:
        return self.add_element(software_system, True)

    def add_container(self, container: Optional[Container]) -> bool:
        return False

    def add_component(self, component: Optional[Component]) -> bool:
        return False

    def remove(self, element: Optional[Element]) -> None:
        self.remove_element(element)

    # -------------------------
    # Bulk helpers
    # -------------------------

    def add_all_software_systems(self) -> None:
        for software_system in self.model.software_systems:
            self.add_software_system(software_system)

    def add_all_people(self) -> None:
        for person in self.model.people:
            self.add_person(person)

    def add_nearest_neighbours(self, element: Optional[Element], kind: ElementKind) -> None:
        """Add the element and every element of ``kind`` one relationship away from it."""
        if element is None or not self.model.contains(element):
            return

        self.add(element)

        for relationship in self.model.relationships_of():
            if relationship.source_id == element.id:
                neighbour = self.model.destination_of(relationship)
            elif relationship.destination_id == element.id:
                neighbour = self.model.source_of(relationship)
            else:
                continue

            if neighbour.kind is kind:
                self.add(neighbour)

    # -------------------------
    # Membership set
    # -------------------------

    def add_element(self, element: Optional[Element], add_relationships: bool = True) -> bool:
        """
        Insert an element; a no-op if it is already a member.

        With ``add_relationships`` False, relationships between the new element
        and the current members stay hidden until one of them is re-added.
        """
        if element is None:
            return False

        if not self.model.contains(element):
            logger.debug(
                "element %s is not part of the model",
                element.name,
                extra={"view_key": self.key, "element_id": element.id},
            )
            return False

        if element.id in self._element_views:
            return False

        self._element_views[element.id] = ElementView(element)

        touching = {
            r.id for r in self.model.relationships_of() if r.touches(element.id)
        }
        if add_relationships:
            self._removed_relationship_ids -= touching
        else:
            self._removed_relationship_ids |= touching

        return True

    def remove_element(self, element: Optional[Element]) -> None:
        if element is None:
            return
        if self._element_views.pop(element.id, None) is None:
            return

        touching = {
            r.id for r in self.model.relationships_of() if r.touches(element.id)
        }
        self._removed_relationship_ids -= touching

    def remove_relationship(self, relationship: Optional[Relationship]) -> None:
        if relationship is None or self.model.get_relationship(relationship.id) is None:
            return
        self._removed_relationship_ids.add(relationship.id)

    def is_element_in_view(self, element: Optional[Element]) -> bool:
        return element is not None and element.id in self._element_views

    def is_relationship_in_view(self, relationship: Optional[Relationship]) -> bool:
        return relationship is not None and any(
            rv.id == relationship.id for rv in self.relationships
        )

    @property
    def elements(self) -> List[ElementView]:
        return list(self._element_views.values())

    @property
    def relationships(self) -> List[RelationshipView]:
        return [
            RelationshipView(relationship)
            for relationship in self.model.relationships_of()
            if relationship.id not in self._removed_relationship_ids
            and relationship.source_id in self._element_views
            and relationship.destination_id in self._element_views
        ]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(key={self.key!r}, "
            f"elements={len(self._element_views)})"
        )
