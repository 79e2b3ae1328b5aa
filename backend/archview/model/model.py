"""
Model - in-memory element graph consumed by the view layer.

Stores people, software systems, containers, components and the
relationships between them. Views only read from it.
"""

import logging
from typing import Dict, List, Optional

from archview.model.elements import (
    Component,
    Container,
    Element,
    Person,
    Relationship,
    SoftwareSystem,
)

logger = logging.getLogger(__name__)


class Model:
    """
    Owns every element and relationship; insertion order is preserved.

    Usage:
        model = Model()
        shop = model.add_software_system("Shop")
        api = model.add_container(shop, "API", technology="FastAPI")
        orders = model.add_component(api, "Orders")
    """

    def __init__(self) -> None:
        self._elements: Dict[str, Element] = {}
        self._relationships: Dict[str, Relationship] = {}

    # -------------------------
    # Element creation
    # -------------------------

    def add_person(self, name: str, description: Optional[str] = None) -> Person:
        self._ensure_unique_name(name, self.people)
        return self._register(Person(name=name, description=description))

    def add_software_system(
        self, name: str, description: Optional[str] = None
    ) -> SoftwareSystem:
        self._ensure_unique_name(name, self.software_systems)
        return self._register(SoftwareSystem(name=name, description=description))

    def add_container(
        self,
        software_system: SoftwareSystem,
        name: str,
        description: Optional[str] = None,
        technology: Optional[str] = None,
    ) -> Container:
        self._ensure_member(software_system)
        self._ensure_unique_name(name, self.containers_of(software_system))
        return self._register(
            Container(
                name=name,
                description=description,
                technology=technology,
                software_system_id=software_system.id,
            )
        )

    def add_component(
        self,
        container: Container,
        name: str,
        description: Optional[str] = None,
        technology: Optional[str] = None,
    ) -> Component:
        self._ensure_member(container)
        self._ensure_unique_name(name, self.components_of(container))
        return self._register(
            Component(
                name=name,
                description=description,
                technology=technology,
                container_id=container.id,
            )
        )

    def add_relationship(
        self,
        source: Element,
        destination: Element,
        description: str = "",
        technology: Optional[str] = None,
    ) -> Relationship:
        self._ensure_member(source)
        self._ensure_member(destination)
        relationship = Relationship(
            source_id=source.id,
            destination_id=destination.id,
            description=description,
            technology=technology,
        )
        self._relationships[relationship.id] = relationship
        logger.debug(
            "relationship added: %s -> %s",
            source.name,
            destination.name,
            extra={"relationship_id": relationship.id},
        )
        return relationship

    uses = add_relationship

    def remove_relationship(self, relationship: Relationship) -> None:
        """Drop a relationship from the model. Views that removed it keep a stale id."""
        if self._relationships.pop(relationship.id, None) is not None:
            logger.debug(
                "relationship removed",
                extra={"relationship_id": relationship.id},
            )

    # -------------------------
    # Lookup
    # -------------------------

    def get_element(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)

    def get_relationship(self, relationship_id: str) -> Optional[Relationship]:
        return self._relationships.get(relationship_id)

    def contains(self, element: Optional[Element]) -> bool:
        return element is not None and element.id in self._elements

    def source_of(self, relationship: Relationship) -> Element:
        return self._elements[relationship.source_id]

    def destination_of(self, relationship: Relationship) -> Element:
        return self._elements[relationship.destination_id]

    @property
    def elements(self) -> List[Element]:
        return list(self._elements.values())

    @property
    def people(self) -> List[Person]:
        return [e for e in self._elements.values() if isinstance(e, Person)]

    @property
    def software_systems(self) -> List[SoftwareSystem]:
        return [e for e in self._elements.values() if isinstance(e, SoftwareSystem)]

    @property
    def relationships(self) -> List[Relationship]:
        return list(self._relationships.values())

    def relationships_of(self) -> List[Relationship]:
        """Every relationship in the model, regardless of endpoint."""
        return self.relationships

    def containers_of(self, software_system: SoftwareSystem) -> List[Container]:
        return [
            e for e in self._elements.values()
            if isinstance(e, Container) and e.software_system_id == software_system.id
        ]

    def components_of(self, container: Container) -> List[Component]:
        return [
            e for e in self._elements.values()
            if isinstance(e, Component) and e.container_id == container.id
        ]

    def owning_software_system(self, container: Container) -> SoftwareSystem:
        return self._elements[container.software_system_id]

    def owning_container(self, component: Component) -> Container:
        return self._elements[component.container_id]

    # -------------------------
    # Internals
    # -------------------------

    def _register(self, element: Element) -> Element:
        self._elements[element.id] = element
        logger.debug(
            "%s added: %s",
            element.kind.value,
            element.name,
            extra={"element_id": element.id},
        )
        return element

    def _ensure_member(self, element: Optional[Element]) -> None:
        if not self.contains(element):
            name = element.name if element is not None else None
            raise ValueError(f"Element {name!r} does not belong to this model.")

    @staticmethod
    def _ensure_unique_name(name: str, siblings: List[Element]) -> None:
        wanted = (name or "").strip()
        if any(sibling.name == wanted for sibling in siblings):
            raise ValueError(f"An element named {wanted!r} already exists here.")
