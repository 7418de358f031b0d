"""Domain models for places and travel-time edges."""

from dataclasses import dataclass
from enum import Enum


class PlaceCategory(str, Enum):
    """Kind of place; the value is the label exposed over HTTP."""

    ZONE = "Zona"
    DISTRIBUTION_CENTER = "CentroDistribucion"

    @classmethod
    def parse(cls, value: object) -> "PlaceCategory":
        """Accept wire labels as well as English names, case-insensitively."""
        text = str(value or "").strip().replace("_", "").replace(" ", "").lower()
        aliases = {
            "zona": cls.ZONE,
            "zone": cls.ZONE,
            "centrodistribucion": cls.DISTRIBUTION_CENTER,
            "distributioncenter": cls.DISTRIBUTION_CENTER,
        }
        try:
            return aliases[text]
        except KeyError:
            raise ValueError(f"Unknown place category '{value}'") from None


@dataclass(frozen=True, slots=True)
class Place:
    """A named node of the logistics graph."""

    id: str
    name: str
    category: PlaceCategory


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed travel cost in minutes between two place ids."""

    from_id: str
    to_id: str
    travel_minutes: float
