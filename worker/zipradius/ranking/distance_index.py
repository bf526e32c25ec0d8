"""Request-scoped lookup of distances from the search origin, keyed by ZIP code."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Tuple

from zipradius.etl.transform import extract_zip_distances

logger = logging.getLogger(__name__)


class DataIntegrityError(KeyError):
    """Raised when a clinic's ZIP code has no distance from the radius search."""


class DistanceIndex(Mapping):
    """Immutable ZIP code -> distance mapping built once per radius search.

    Lookups for ZIP codes that were not part of the radius search response
    raise :class:`DataIntegrityError`, a ``KeyError``: clinics are only fetched
    for ZIP codes the search returned, so a miss means the two data sources
    disagree and the request cannot be answered. ``get`` still returns its
    default for unknown ZIP codes. Attributes cannot be rebound once built.
    """

    __slots__ = ("_distances", "_identifiers", "_unit")

    def __init__(self, pairs: Iterable[Tuple[str, Any]] = (), unit: str = "mile") -> None:
        distances: Dict[str, float] = {}
        for zipcode, raw_distance in pairs:
            try:
                distance = float(raw_distance)
            except (TypeError, ValueError):
                raise ValueError(f"distance for {zipcode!r} is not numeric: {raw_distance!r}") from None
            if distance < 0 or math.isnan(distance):
                raise ValueError(f"distance for {zipcode!r} must be non-negative, got {raw_distance!r}")
            # Later duplicates win, first-seen order is kept for the identifier list.
            distances[zipcode] = distance

        object.__setattr__(self, "_distances", MappingProxyType(distances))
        object.__setattr__(self, "_identifiers", tuple(distances))
        object.__setattr__(self, "_unit", unit)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_radius_payload(cls, payload: Dict[str, Any], unit: str = "mile") -> "DistanceIndex":
        """Build the index from a decoded ``radius.json`` response."""
        index = cls(extract_zip_distances(payload), unit=unit)
        logger.debug("Built distance index with %d ZIP codes (unit=%s)", len(index), unit)
        return index

    @property
    def unit(self) -> str:
        """Unit the distances are expressed in (``mile`` or ``km``)."""
        return self._unit

    @property
    def identifiers(self) -> Tuple[str, ...]:
        """ZIP codes in the order the radius search returned them."""
        return self._identifiers

    def __getitem__(self, zipcode: str) -> float:
        try:
            return self._distances[zipcode]
        except KeyError:
            raise DataIntegrityError(
                f"ZIP code {zipcode!r} is missing from the radius search distances"
            ) from None

    def __contains__(self, zipcode: object) -> bool:
        return zipcode in self._distances

    def __iter__(self) -> Iterator[str]:
        return iter(self._identifiers)

    def __len__(self) -> int:
        return len(self._distances)

    def __repr__(self) -> str:
        return f"DistanceIndex({dict(self._distances)!r}, unit={self.unit!r})"
