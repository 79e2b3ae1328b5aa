"""
ComponentView - the components of one container and what they talk to.

Only elements that matter to the focus container may enter the view:
- the container's own software system and the container itself are implicit
- components of other containers are rejected
- people, other software systems and other containers are accepted

Rejections are silent to the caller; bulk operations and dependency
expansion hit them routinely.
"""

import logging
from typing import List, Optional, Set

from archview.errors import ValidationError, ValidationLevel
from archview.model import (
    Component,
    Container,
    Element,
    ElementKind,
    Model,
    SoftwareSystem,
)
from archview.validation import ValidationResult
from archview.view.static_view import StaticView

logger = logging.getLogger(__name__)


class ComponentView(StaticView):
    def __init__(
        self,
        model: Model,
        container: Optional[Container] = None,
        description: str = "",
        *,
        key: Optional[str] = None,
        title: Optional[str] = None,
        container_id: Optional[str] = None,
    ) -> None:
        software_system = (
            model.owning_software_system(container) if container is not None else None
        )
        super().__init__(model, software_system, description, key=key, title=title)
        self._container = container
        self._container_id = container_id

    @property
    def container(self) -> Optional[Container]:
        return self._container

    @property
    def container_id(self) -> Optional[str]:
        """Live container id, falling back to the persisted one."""
        if self._container is not None:
            return self._container.id
        return self._container_id

    def set_container(self, container: Container) -> None:
        self._container = container
        self._container_id = container.id
        self._software_system = self.model.owning_software_system(container)

    @property
    def name(self) -> str:
        return f"{self.software_system.name} - {self.container.name} - Components"

    # -------------------------
    # Containment filter
    # -------------------------

    def add_software_system(self, software_system: Optional[SoftwareSystem]) -> bool:
        if software_system is None or software_system == self.software_system:
            return False
        return self.add_element(software_system, True)

    def add_container(self, container: Optional[Container]) -> bool:
        if container is None or container.id == self.container_id:
            return False
        return self.add_element(container, True)

    def add_component(self, component: Optional[Component]) -> bool:
        if component is None:
            return False
        if component.container_id != self.container_id:
            logger.debug(
                "component %s belongs to another container",
                component.name,
                extra={"view_key": self.key, "element_id": component.id},
            )
            return False
        return self.add_element(component, True)

    def add_all_containers(self) -> None:
        for container in self.model.containers_of(self.software_system):
            self.add_container(container)

    def add_all_components(self) -> None:
        for component in self.model.components_of(self.container):
            self.add_component(component)

    def add_all_elements(self) -> None:
        self.add_all_software_systems()
        self.add_all_people()
        self.add_all_containers()
        self.add_all_components()

    def add_nearest_neighbours(
        self, element: Optional[Element], kind: Optional[ElementKind] = None
    ) -> None:
        kinds = [kind] if kind is not None else [
            ElementKind.SOFTWARE_SYSTEM,
            ElementKind.PERSON,
            ElementKind.CONTAINER,
            ElementKind.COMPONENT,
        ]
        for each in kinds:
            super().add_nearest_neighbours(element, each)

    # -------------------------
    # Dependency expansion
    # -------------------------

    def add_direct_dependencies(self) -> None:
        """
        Add every element one relationship away from the container or any
        current member, then drop relationships between two outsiders.

        The inside set is frozen before anything is added: neighbours found
        here are not expanded further, and a relationship survives only if
        one of its endpoints was inside to begin with.
        """
        inside = self._inside_element_ids()

        added = 0
        for relationship in self.model.relationships_of():
            if relationship.source_id in inside:
                added += self.add(self.model.destination_of(relationship))
            if relationship.destination_id in inside:
                added += self.add(self.model.source_of(relationship))

        outside = [
            rv.relationship
            for rv in self.relationships
            if rv.relationship.source_id not in inside
            and rv.relationship.destination_id not in inside
        ]
        for relationship in outside:
            self.remove_relationship(relationship)

        logger.info(
            "direct dependencies added to %s",
            self.key,
            extra={"view_key": self.key, "added": added, "pruned": len(outside)},
        )

    def _inside_element_ids(self) -> Set[str]:
        inside = {self.container_id}
        inside.update(ev.element.id for ev in self.elements)
        return inside

    # -------------------------
    # Validation
    # -------------------------

    def validate(self) -> ValidationResult:
        """
        Check the view against its containment rules and the model.

        Reports, per element or relationship:
        - components of another container, the focus container itself,
          or the software system that owns it
        - elements that are not part of the model
        - relationships (shown or removed) that no longer resolve in the model
        """
        if self.container_id is None:
            return ValidationResult.from_errors([
                ValidationError(
                    level=ValidationLevel.VIEW,
                    message="view is not bound to a container",
                    object_id=self.key or "",
                )
            ])

        errors: List[ValidationError] = []
        errors.extend(self._element_errors())
        errors.extend(self._relationship_errors())
        return ValidationResult.from_errors(errors)

    def _element_errors(self) -> List[ValidationError]:
        errors = []
        for ev in self.elements:
            element = ev.element
            if not self.model.contains(element):
                message = f"{element.name} is not part of the model"
            elif isinstance(element, Component) and element.container_id != self.container_id:
                message = f"component {element.name} belongs to another container"
            elif isinstance(element, Container) and element.id == self.container_id:
                message = f"container {element.name} is the focus of this view"
            elif isinstance(element, SoftwareSystem) and element == self.software_system:
                message = f"software system {element.name} owns the focus container"
            else:
                continue

            errors.append(
                ValidationError(
                    level=ValidationLevel.ELEMENT,
                    message=message,
                    object_id=element.id,
                )
            )
        return errors

    def _relationship_errors(self) -> List[ValidationError]:
        errors = []
        for rv in self.relationships:
            relationship = rv.relationship
            for endpoint_id in (relationship.source_id, relationship.destination_id):
                if self.model.get_element(endpoint_id) is None:
                    errors.append(
                        ValidationError(
                            level=ValidationLevel.RELATIONSHIP,
                            message=f"endpoint {endpoint_id} is not part of the model",
                            object_id=relationship.id,
                        )
                    )

        for relationship_id in sorted(self._removed_relationship_ids):
            if self.model.get_relationship(relationship_id) is None:
                errors.append(
                    ValidationError(
                        level=ValidationLevel.RELATIONSHIP,
                        message="removed relationship is no longer in the model",
                        object_id=relationship_id,
                    )
                )
        return errors
