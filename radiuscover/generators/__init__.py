"""Graph families for covering benchmarks, looked up by name."""

from typing import Optional

from radiuscover.generators.base import BaseGenerator
from radiuscover.generators.erdos_renyi import ErdosRenyiGenerator
from radiuscover.generators.grid_2d import Grid2DGenerator, grid_shape
from radiuscover.generators.path import CycleGenerator, PathGenerator

GENERATOR_REGISTRY: dict[str, type[BaseGenerator]] = {
    cls.name: cls
    for cls in (PathGenerator, CycleGenerator, Grid2DGenerator, ErdosRenyiGenerator)
}


def get_generator(name: str) -> type[BaseGenerator]:
    if name not in GENERATOR_REGISTRY:
        available = ", ".join(sorted(GENERATOR_REGISTRY))
        raise ValueError(f"Unknown generator '{name}'. Available: {available}")
    return GENERATOR_REGISTRY[name]


def list_generators() -> list[str]:
    return sorted(GENERATOR_REGISTRY)


def known_optimum(generator: str, size: int, radius: int) -> Optional[int]:
    """Optimal shop count for a generated instance, or None when unknown."""
    cls = GENERATOR_REGISTRY.get(generator)
    return cls().optimal_shops(size, radius) if cls else None


__all__ = [
    "BaseGenerator",
    "GENERATOR_REGISTRY",
    "get_generator",
    "list_generators",
    "known_optimum",
    "grid_shape",
    "PathGenerator",
    "CycleGenerator",
    "Grid2DGenerator",
    "ErdosRenyiGenerator",
]
