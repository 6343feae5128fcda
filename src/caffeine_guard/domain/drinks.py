"""Domain models for catalog drinks."""

from dataclasses import dataclass, field
from enum import StrEnum


class DrinkCategory(StrEnum):
    """Catalog grouping for drinks."""

    BREWED = "brewed"
    ESPRESSO = "espresso"
    MILK = "milk"
    COLD = "cold"
    TEA = "tea"
    SPECIALTY = "specialty"
    ENERGY = "energy"
    SODA = "soda"


class DrinkTag(StrEnum):
    """Optional markers used by the recommendation filters."""

    DECAF = "decaf"
    LOW_CAFFEINE = "low_caffeine"


@dataclass(frozen=True)
class Drink:
    """A catalog drink with its nominal caffeine per serving."""

    id: str
    name: str
    category: DrinkCategory
    caffeine_mg: float
    description: str = ""
    tags: frozenset[DrinkTag] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.caffeine_mg < 0:
            raise ValueError(f"Drink {self.id!r} has negative caffeine_mg")

    def has_tag(self, *tags: DrinkTag) -> bool:
        """Return True when the drink carries any of the given tags."""
        return any(tag in self.tags for tag in tags)
