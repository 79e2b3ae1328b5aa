"""
ViewSet - registry of the views defined over one model.
"""

import logging
import re
from typing import Dict, List, Optional

from archview.model import Container, Model
from archview.view.component_view import ComponentView
from archview.view.static_view import StaticView

logger = logging.getLogger(__name__)


class ViewSet:
    def __init__(self, model: Model) -> None:
        self.model = model
        self._views: Dict[str, StaticView] = {}

    def create_component_view(
        self,
        container: Container,
        key: Optional[str] = None,
        description: str = "",
    ) -> ComponentView:
        """Create a view permanently bound to ``container``."""
        if not self.model.contains(container):
            raise ValueError(f"Container {container.name!r} does not belong to this model.")

        key = key or self._generate_key(container)
        self._ensure_key_available(key)

        view = ComponentView(self.model, container, description, key=key)
        self._views[key] = view
        logger.debug("component view created: %s", view.name, extra={"view_key": key})
        return view

    new_component_view = create_component_view

    def restore_component_view(
        self,
        key: str,
        container_id: str,
        description: str = "",
    ) -> ComponentView:
        """Register a view known only by its stored container id; see ``hydrate``."""
        self._ensure_key_available(key)
        view = ComponentView(self.model, None, description, key=key, container_id=container_id)
        self._views[key] = view
        return view

    def hydrate(self) -> None:
        """Resolve stored container ids of restored views against the model."""
        for view in self.component_views:
            if view.container is not None:
                continue
            container = self.model.get_element(view.container_id)
            if isinstance(container, Container):
                view.set_container(container)
            else:
                logger.warning(
                    "container %s of view %s is not in the model",
                    view.container_id,
                    view.key,
                    extra={"view_key": view.key},
                )

    def get_view(self, key: str) -> Optional[StaticView]:
        return self._views.get(key)

    @property
    def views(self) -> List[StaticView]:
        return list(self._views.values())

    @property
    def component_views(self) -> List[ComponentView]:
        return [v for v in self._views.values() if isinstance(v, ComponentView)]

    def _ensure_key_available(self, key: str) -> None:
        if not key or not key.strip():
            raise ValueError("A view key must be non-empty.")
        if key in self._views:
            raise ValueError(f"A view with the key {key!r} already exists.")

    def _generate_key(self, container: Container) -> str:
        software_system = self.model.owning_software_system(container)
        base = f"{software_system.name}-{container.name}-Components"
        base = re.sub(r"[^A-Za-z0-9_-]+", "", base)
        key = base
        suffix = 2
        while key in self._views:
            key = f"{base}-{suffix}"
            suffix += 1
        return key
