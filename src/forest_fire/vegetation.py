"""Vegetation kinds and their burning properties."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class VegetationTraits:
    """Burning properties of one vegetation kind.

    Attributes:
        ignitable: Whether the kind can catch fire at all
        burn_duration: Steps the kind burns for if nobody puts it out
        base_ignition_probability: Ignition chance from a single burning neighbor
        self_ignition_multiplier: Scales the spontaneous ignition chance
    """
    ignitable: bool
    burn_duration: int
    base_ignition_probability: float
    self_ignition_multiplier: float = 1.0


class VegetationKind(Enum):
    """Terrain or vegetation covering a cell.

    Values double as the export codes of unburnt cells.
    """
    Water = 0
    Rock = 1
    Grass = 2
    Bush = 3
    SmallTree = 4
    GrowingTree = 5
    Tree = 6

    @property
    def traits(self) -> VegetationTraits:
        return VEGETATION_TABLE[self]

    @property
    def ignitable(self) -> bool:
        return self.traits.ignitable

    @property
    def burn_duration(self) -> int:
        return self.traits.burn_duration

    @property
    def base_ignition_probability(self) -> float:
        return self.traits.base_ignition_probability

    @property
    def self_ignition_multiplier(self) -> float:
        return self.traits.self_ignition_multiplier


VEGETATION_TABLE: dict[VegetationKind, VegetationTraits] = {
    VegetationKind.Water: VegetationTraits(ignitable=False, burn_duration=0, base_ignition_probability=0.0),
    VegetationKind.Rock: VegetationTraits(ignitable=False, burn_duration=0, base_ignition_probability=0.0),
    VegetationKind.Grass: VegetationTraits(True, 1, 0.8, 1.5),
    VegetationKind.Bush: VegetationTraits(True, 2, 0.7, 1.2),
    VegetationKind.SmallTree: VegetationTraits(True, 3, 0.6, 1.0),
    VegetationKind.GrowingTree: VegetationTraits(True, 4, 0.5, 0.8),
    VegetationKind.Tree: VegetationTraits(True, 5, 0.4, 0.6),
}


def ignitable(kind: VegetationKind) -> bool:
    return kind.ignitable


def burn_duration(kind: VegetationKind) -> int:
    return kind.burn_duration


def base_ignition_probability(kind: VegetationKind) -> float:
    return kind.base_ignition_probability


def self_ignition_multiplier(kind: VegetationKind) -> float:
    """Multiplier applied only by the self-ignition formula (1.0 for terrain)."""
    return kind.self_ignition_multiplier
