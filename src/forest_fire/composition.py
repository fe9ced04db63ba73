"""Vegetation composition used to seed a new grid."""

import logging
from dataclasses import dataclass

from .constants import COMPOSITION_TOLERANCE
from .vegetation import VegetationKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositionConfig:
    """Fractional share of each vegetation kind on a freshly created grid.

    Shares must be non-negative and add up to 1.0 (within 0.001).
    """
    water: float = 0.05
    rock: float = 0.03
    grass: float = 0.10
    bush: float = 0.15
    small_tree: float = 0.12
    growing_tree: float = 0.20
    tree: float = 0.35

    def __post_init__(self):
        invalid = {kind.name: share for kind, share in self.shares() if not share >= 0}
        if invalid:
            logger.error(f"Invalid composition shares: {invalid}")
            raise ValueError(f"Composition shares must be non-negative numbers, got {invalid}")

        total = self.total
        if not abs(total - 1.0) < COMPOSITION_TOLERANCE:
            logger.error(f"Composition shares sum to {total}, expected 1.0")
            raise ValueError(f"Percentages must sum to 1.0, got {total}")

    @property
    def total(self) -> float:
        return sum(share for _, share in self.shares())

    def shares(self) -> list[tuple[VegetationKind, float]]:
        """Shares in sampling order: water, rock, grass, bush, small tree, growing tree, tree."""
        return [
            (VegetationKind.Water, self.water),
            (VegetationKind.Rock, self.rock),
            (VegetationKind.Grass, self.grass),
            (VegetationKind.Bush, self.bush),
            (VegetationKind.SmallTree, self.small_tree),
            (VegetationKind.GrowingTree, self.growing_tree),
            (VegetationKind.Tree, self.tree),
        ]

    def select(self, r: float) -> VegetationKind:
        """
        Pick a vegetation kind for a uniform draw using cumulative thresholds.

        Tree is the final bucket and absorbs any rounding remainder.

        Args:
            r: Uniform random value in [0, 1)

        Returns:
            The selected VegetationKind
        """
        threshold = 0.0
        for kind, share in self.shares()[:-1]:
            threshold += share
            if r < threshold:
                return kind
        return VegetationKind.Tree
