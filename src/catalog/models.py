# src/catalog/models.py — v1
"""Catalog entity models and source-location extraction."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from readmekit.core.entity_ref import DEFAULT_NAMESPACE, stringify_entity_ref

SOURCE_LOCATION_ANNOTATION = "backstage.io/source-location"
MANAGED_BY_LOCATION_ANNOTATION = "backstage.io/managed-by-location"


class EntityMetadata(BaseModel):
    """Subset of entity metadata used here."""

    model_config = ConfigDict(extra="ignore")

    name: str
    namespace: str = DEFAULT_NAMESPACE
    title: str | None = None
    description: str | None = None
    annotations: dict[str, str] = Field(default_factory=dict)


class Entity(BaseModel):
    """A catalog entity as returned by the catalog API."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    api_version: str = Field(default="backstage.io/v1alpha1", alias="apiVersion")
    kind: str
    metadata: EntityMetadata

    @property
    def ref(self) -> str:
        """Canonical entity reference string."""
        return stringify_entity_ref(
            self.kind, self.metadata.namespace, self.metadata.name
        )


class SourceLocation(BaseModel):
    """A location annotation split into its type and target."""

    type: str
    target: str


def parse_location_ref(value: str) -> SourceLocation | None:
    """Split a 'type:target' location reference. None if malformed."""
    loc_type, sep, target = value.partition(":")
    if not sep or not loc_type or not target:
        return None
    return SourceLocation(type=loc_type, target=target)


def get_entity_source_location(entity: Entity) -> SourceLocation | None:
    """Source location of an entity, or None if it carries none.

    The source-location annotation wins; the managed-by location (the
    catalog file the entity was registered from) is the fallback.
    """
    annotations = entity.metadata.annotations
    value = annotations.get(SOURCE_LOCATION_ANNOTATION) or annotations.get(
        MANAGED_BY_LOCATION_ANNOTATION
    )
    if not value:
        return None
    return parse_location_ref(value)
