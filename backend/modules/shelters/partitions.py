"""
Species dispatch.

One store implementation is instantiated once per species; this registry
is the single place where a species value is turned into the store for
that partition.
"""

from typing import Any, Generic, Iterator, Mapping, TypeVar

from .exceptions import ShelterNotFoundError
from .models import Species

T = TypeVar("T")


def resolve_species(value: Any) -> Species:
    """
    Validate a shelter identifier.

    Accepts a Species or its name/value in any case ("dog", "DOG").

    Raises:
        ShelterNotFoundError: If the value names no known shelter
    """
    if isinstance(value, Species):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for species in Species:
            if normalized == species.value:
                return species
    raise ShelterNotFoundError(value)


class SpeciesPartitions(Generic[T]):
    """Per-species instances of one store type."""

    def __init__(self, stores: Mapping[Species, T]):
        self._stores = dict(stores)

    def get(self, species: Any) -> T:
        """
        Get the store for a species.

        Raises:
            ShelterNotFoundError: If the species is unknown or has no store
        """
        resolved = resolve_species(species)
        try:
            return self._stores[resolved]
        except KeyError:
            raise ShelterNotFoundError(species) from None

    def items(self) -> Iterator[tuple[Species, T]]:
        """Iterate partitions in Species declaration order."""
        for species in Species:
            if species in self._stores:
                yield species, self._stores[species]

    def __contains__(self, species: object) -> bool:
        return species in self._stores
