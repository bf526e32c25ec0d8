"""Tier-then-distance ranking of partner clinics."""

from __future__ import annotations

import logging
from operator import itemgetter
from typing import Iterable, List, Tuple

from zipradius.models import PartnerClinic, RankedClinic
from zipradius.ranking.distance_index import DistanceIndex
from zipradius.ranking.formatter import format_response
from zipradius.ranking.tiers import tier_rank

logger = logging.getLogger(__name__)

SortKey = Tuple[int, float]


def sort_key(clinic: PartnerClinic, distances: DistanceIndex) -> SortKey:
    """Composite key: tier position first, then distance from the origin."""
    return tier_rank(clinic.tier), distances[clinic.zipcode]


def sort_clinics(clinics: Iterable[PartnerClinic], distances: DistanceIndex) -> List[PartnerClinic]:
    """Return ``clinics`` ordered by tier (A first) and then by distance.

    ``list.sort`` is stable, so clinics with the same tier and the same distance
    keep the order they had in ``clinics``. Every key is resolved before
    sorting starts: an unknown tier or a ZIP code without a distance fails the
    whole call and nothing is returned. The input sequence is left untouched.
    """
    keyed = [(sort_key(clinic, distances), clinic) for clinic in clinics]
    keyed.sort(key=itemgetter(0))
    return [clinic for _, clinic in keyed]


def rank(clinics: Iterable[PartnerClinic], distances: DistanceIndex) -> List[RankedClinic]:
    """Sort clinics by tier and distance and project them into ranked results."""
    ordered = sort_clinics(clinics, distances)
    logger.debug("Ranked %d clinics", len(ordered))
    return format_response(ordered, distances)
