# View layer: membership sets, the component view and the view registry.

from archview.view.component_view import ComponentView
from archview.view.records import ElementView, RelationshipView
from archview.view.static_view import StaticView
from archview.view.view_set import ViewSet

__all__ = [
    "ComponentView",
    "ElementView",
    "RelationshipView",
    "StaticView",
    "ViewSet",
]
