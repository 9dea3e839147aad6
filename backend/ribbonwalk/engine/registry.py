"""Stage registry — scene stages are plain functions registered via decorator.

Usage:
    @stage(id="L1.01", layer=Layer.LAYOUT, dependencies=["G0.01"], tags={"fit"})
    def viewport_fit(scene: Scene) -> None:
        scene.chain = fit(scene.chain)

Generation stages are tagged with the chain variant they produce; each
variant has exactly one generator.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from graphlib import CycleError, TopologicalSorter
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ribbonwalk.engine.context import Scene

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    GENERATION = 0
    LAYOUT = 1
    OUTLINE = 2


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["Scene"], None]
    dependencies: list[str] = field(default_factory=list)
    tags: set[str] = field(default_factory=set)
    description: str = ""


class StageRegistry:
    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}
        self._generators: dict[str, str] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        if spec.layer == Layer.GENERATION:
            for variant in spec.tags:
                owner = self._generators.get(variant)
                if owner is not None:
                    raise ValueError(f"Variant {variant!r} already generated by {owner}")
            self._generators.update(dict.fromkeys(spec.tags, spec.id))
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    @property
    def variants(self) -> set[str]:
        """Chain variants that have a registered generator."""
        return set(self._generators)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Dependency order over ``requested_ids`` (all stages when None).

        Dependencies outside the requested set count as satisfied, so a
        skipped optional stage is never pulled back in. Stages that become
        ready together run by (layer, id).
        """
        pool = {
            sid: s for sid, s in self._stages.items()
            if requested_ids is None or sid in requested_ids
        }
        sorter = TopologicalSorter({sid: [d for d in s.dependencies if d in pool] for sid, s in pool.items()})
        try:
            sorter.prepare()
        except CycleError as e:
            raise ValueError(f"Circular dependency detected among: {set(e.args[1])}") from e

        ordered: list[StageSpec] = []
        while sorter.is_active():
            ready = sorted((pool[sid] for sid in sorter.get_ready()), key=lambda s: (s.layer, s.id))
            ordered.extend(ready)
            sorter.done(*(s.id for s in ready))
        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    tags: set[str] | None = None,
    description: str = "",
):
    """Register the decorated function as a scene stage."""

    def decorator(fn: Callable[["Scene"], None]):
        _registry.register(
            StageSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                tags=tags or set(),
                description=description,
            )
        )
        return fn

    return decorator
