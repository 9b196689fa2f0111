"""Item renderer registry — one handler per page-item kind, registered via decorator.

Usage:
    @item_renderer(kind="Rectangle", description="Filled/stroked frame")
    def render_rectangle(item, ancestor_transform, render_pass) -> None:
        ...

Supporting a new page-item kind = one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from idmlpdf.engine.pipeline import RenderPass
    from idmlpdf.engine.transforms import Transform

logger = logging.getLogger(__name__)

ItemHandler = Callable[[Any, "Transform", "RenderPass"], None]


@dataclass
class ItemRendererSpec:
    kind: str
    fn: ItemHandler
    description: str = ""


class ItemRendererRegistry:
    """Maps page-item kinds (``Rectangle``, ``Group``, ...) to their handlers."""

    def __init__(self) -> None:
        self._renderers: dict[str, ItemRendererSpec] = {}

    def register(self, spec: ItemRendererSpec) -> None:
        if spec.kind in self._renderers:
            raise ValueError(f"Duplicate renderer for item kind: {spec.kind}")
        self._renderers[spec.kind] = spec
        logger.debug("Registered renderer for %s", spec.kind)

    def get(self, kind: str) -> ItemRendererSpec:
        return self._renderers[kind]

    def kinds(self) -> list[str]:
        return sorted(self._renderers)

    def all(self) -> list[ItemRendererSpec]:
        return [self._renderers[k] for k in self.kinds()]

    def __contains__(self, kind: object) -> bool:
        return kind in self._renderers

    @property
    def count(self) -> int:
        return len(self._renderers)


# Module-level singleton
_registry = ItemRendererRegistry()


def get_registry() -> ItemRendererRegistry:
    return _registry


def item_renderer(*, kind: str, description: str = "", registry: ItemRendererRegistry | None = None):
    """Decorator to register a page-item handler."""

    def decorator(fn: ItemHandler) -> ItemHandler:
        (registry or _registry).register(ItemRendererSpec(kind=kind, fn=fn, description=description))
        return fn

    return decorator
