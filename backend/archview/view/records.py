from dataclasses import dataclass

from archview.model.elements import Element, Relationship


@dataclass(frozen=True)
class ElementView:
    element: Element

    @property
    def id(self) -> str:
        return self.element.id


@dataclass(frozen=True)
class RelationshipView:
    relationship: Relationship

    @property
    def id(self) -> str:
        return self.relationship.id
