# MIT License (see LICENSE)
"""
Particle species and the tools a host can select.

Species is a closed set. Everything that differs between a proton, a neutron
and an electron is data, held in a static table of SpeciesProperties; there is
no per-species behaviour beyond that lookup.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpeciesProperties:
    """
    Static per-species constants, in simulation units.

    Attributes:
        charge: Signed charge in elementary charges.
        mass: Mass in proton masses. Always positive.
        radius: Render radius in pixels. Rendering-only.
        color: Render color as a hex string. Rendering-only.
    """
    charge: float
    mass: float
    radius: float
    color: str


class Species(Enum):
    PROTON = "proton"
    NEUTRON = "neutron"
    ELECTRON = "electron"

    @property
    def properties(self) -> SpeciesProperties:
        return SPECIES_TABLE[self]

    @property
    def charge(self) -> float:
        return SPECIES_TABLE[self].charge

    @property
    def mass(self) -> float:
        return SPECIES_TABLE[self].mass

    @property
    def radius(self) -> float:
        return SPECIES_TABLE[self].radius

    @property
    def color(self) -> str:
        return SPECIES_TABLE[self].color

    @property
    def is_nucleon(self) -> bool:
        """Protons and neutrons feel the short-range strong-force correction."""
        return self is not Species.ELECTRON

    @classmethod
    def parse(cls, tag: Species | str | None) -> Species | None:
        """
        Resolve a species tag leniently (case-insensitive).

        Unknown tags are logged and yield None.
        """
        if isinstance(tag, Species) or tag is None:
            return tag
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            logger.warning("Ignoring unknown species tag %r", tag)
            return None


# Masses relative to the proton (CODATA 2018 ratios).
SPECIES_TABLE: dict[Species, SpeciesProperties] = {
    Species.PROTON: SpeciesProperties(charge=1.0, mass=1.0, radius=8.0, color="#5070ff"),
    Species.NEUTRON: SpeciesProperties(charge=0.0, mass=1.00137842, radius=8.0, color="#20cccc"),
    Species.ELECTRON: SpeciesProperties(charge=-1.0, mass=1.0 / 1836.15267, radius=2.0, color="#882020"),
}


class Tool(Enum):
    """
    The tool selected in the host GUI.

    Particle tools place a particle of the matching species; MOVE and PAN are
    camera/selection tools and never place anything.
    """
    PROTON = "proton"
    NEUTRON = "neutron"
    ELECTRON = "electron"
    MOVE = "move"
    PAN = "pan"

    @property
    def species(self) -> Species | None:
        """The species this tool places, or None for MOVE/PAN."""
        try:
            return Species(self.value)
        except ValueError:
            return None

    @classmethod
    def parse(cls, tag: Tool | Species | str | None) -> Tool | None:
        """
        Resolve a host-supplied tool tag.

        Accepts a Tool, a Species (its particle tool) or a string value
        (case-insensitive). Unknown tags are logged and yield None so
        callers can treat them as a no-op.
        """
        if isinstance(tag, Tool) or tag is None:
            return tag
        if isinstance(tag, Species):
            return cls(tag.value)
        try:
            return cls(str(tag).strip().lower())
        except ValueError:
            logger.warning("Ignoring unknown tool tag %r", tag)
            return None
