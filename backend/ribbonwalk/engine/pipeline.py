"""Pipeline orchestrator — runs scene stages in dependency order with config gating."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.engine.context import Scene
from ribbonwalk.engine.registry import StageRegistry, get_registry

logger = logging.getLogger(__name__)

_STAGE_PACKAGES = ["generation", "layout", "outline"]


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    for pkg_name in _STAGE_PACKAGES:
        package_name = f"ribbonwalk.engine.{pkg_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


class Pipeline:
    """Builds a Scene by running the registered stages."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, scene: Scene) -> Scene:
        """Run every enabled stage on the given scene."""
        scene.config.validate()
        start = time.perf_counter()

        ordered = self._ordered(scene)
        logger.info(
            "Pipeline: %d stages queued for %s chain",
            len(ordered),
            scene.config.variant,
        )

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(scene)
                scene.completed_stages.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                scene.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d circles, %d fillers, %d arcs (%s) in %.0fms",
            len(scene.chain),
            len(scene.fillers),
            len(scene.arcs),
            scene.status,
            total,
        )
        return scene

    def _ordered(self, scene: Scene):
        skip_ids = self._config_gate(scene.config)
        requested = {s.id for s in self.registry.all() if not (s.tags & skip_ids)}
        return self.registry.resolve_order(requested)

    def _config_gate(self, config: SceneConfig) -> set[str]:
        """Return the stage tags disabled by this config.

        - Exactly one chain generator runs, picked by ``variant``
        - Viewport fitting and void filling are opt-in
        """
        skip = self.registry.variants - {config.variant}
        if not config.fit_viewport:
            skip.add("fit")
        if not config.fill_voids:
            skip.add("fill")
        return skip


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline over the registered stages."""
    register_stages()
    return Pipeline()


def build_scene(config: SceneConfig | None = None) -> Scene:
    """Generate a complete scene for ``config`` in one call."""
    scene = Scene(config=config or SceneConfig())
    return create_pipeline().run(scene)
