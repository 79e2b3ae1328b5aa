from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from archview.model import Element, Model

# ---- Element definitions ----

class PersonDefinition(BaseModel):
    name: str
    description: Optional[str] = None


class ComponentDefinition(BaseModel):
    name: str
    description: Optional[str] = None
    technology: Optional[str] = None


class ContainerDefinition(BaseModel):
    name: str
    description: Optional[str] = None
    technology: Optional[str] = None
    components: List[ComponentDefinition] = Field(default_factory=list)


class SoftwareSystemDefinition(BaseModel):
    name: str
    description: Optional[str] = None
    containers: List[ContainerDefinition] = Field(default_factory=list)


class RelationshipDefinition(BaseModel):
    source: str       # "Person", "System", "System/Container" or "System/Container/Component"
    destination: str
    description: str = ""
    technology: Optional[str] = None


# ---- Root definition ----

class ModelDefinition(BaseModel):
    people: List[PersonDefinition] = Field(default_factory=list)
    software_systems: List[SoftwareSystemDefinition] = Field(default_factory=list)
    relationships: List[RelationshipDefinition] = Field(default_factory=list)


def build_model(definition: ModelDefinition | dict) -> Model:
    """Build a Model from a definition; relationship endpoints are element paths."""
    if isinstance(definition, dict):
        definition = ModelDefinition.model_validate(definition)

    model = Model()
    by_path: Dict[str, Element] = {}

    for person in definition.people:
        by_path[person.name] = model.add_person(person.name, person.description)

    for system_def in definition.software_systems:
        system = model.add_software_system(system_def.name, system_def.description)
        by_path[system.name] = system

        for container_def in system_def.containers:
            container = model.add_container(
                system,
                container_def.name,
                container_def.description,
                container_def.technology,
            )
            container_path = f"{system.name}/{container.name}"
            by_path[container_path] = container

            for component_def in container_def.components:
                component = model.add_component(
                    container,
                    component_def.name,
                    component_def.description,
                    component_def.technology,
                )
                by_path[f"{container_path}/{component.name}"] = component

    for rel in definition.relationships:
        source = by_path.get(rel.source.strip())
        destination = by_path.get(rel.destination.strip())
        if source is None or destination is None:
            missing = rel.source if source is None else rel.destination
            raise ValueError(f"Unknown relationship endpoint: {missing!r}")

        model.add_relationship(source, destination, rel.description, rel.technology)

    return model
