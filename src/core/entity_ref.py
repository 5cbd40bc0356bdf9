# src/core/entity_ref.py — v1
"""Entity reference parsing and canonicalisation.

Accepted forms: "kind:namespace/name", "kind:name", "namespace/name" and
"name". Missing parts fall back to the defaults below.
"""

from __future__ import annotations

from dataclasses import dataclass

from readmekit.core.errors import InvalidEntityRefError

DEFAULT_KIND = "component"
DEFAULT_NAMESPACE = "default"


@dataclass(frozen=True)
class EntityRef:
    """Parsed entity reference."""

    kind: str
    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.kind.lower()}:{self.namespace.lower()}/{self.name}"

    @property
    def cache_key(self) -> str:
        """Case-folded form so equivalent references share one slot."""
        return str(self).lower()


def parse_entity_ref(
    ref: str,
    default_kind: str = DEFAULT_KIND,
    default_namespace: str = DEFAULT_NAMESPACE,
) -> EntityRef:
    """Parse a caller-supplied entity reference.

    Raises:
        InvalidEntityRefError: If the reference is empty or malformed.
    """
    raw = ref.strip() if isinstance(ref, str) else ""
    if not raw:
        raise InvalidEntityRefError("Entity reference must be a non-empty string")

    kind, sep, rest = raw.partition(":")
    if not sep:
        kind, rest = default_kind, raw

    namespace, sep, name = rest.partition("/")
    if not sep:
        namespace, name = default_namespace, rest

    if not kind or not namespace or not name or "/" in name or ":" in name:
        raise InvalidEntityRefError(f"Invalid entity reference: {ref!r}")

    return EntityRef(kind=kind, namespace=namespace, name=name)


def stringify_entity_ref(kind: str, namespace: str | None, name: str) -> str:
    """Canonical string for an entity's kind, namespace and name."""
    return str(EntityRef(kind, namespace or DEFAULT_NAMESPACE, name))
