"""Projection of ranked clinics into response records."""

from dataclasses import asdict
from typing import Any, Dict, Iterable, List

from zipradius.models import PartnerClinic, RankedClinic
from zipradius.ranking.distance_index import DistanceIndex


def to_ranked_clinic(clinic: PartnerClinic, distances: DistanceIndex) -> RankedClinic:
    return RankedClinic(
        name=clinic.name,
        address=clinic.address,
        city=clinic.city,
        state=clinic.state,
        distance=distances[clinic.zipcode],
        tier=clinic.tier,
        contact_email=clinic.contact_email,
        contact_name=clinic.contact_name,
    )


def format_response(clinics: Iterable[PartnerClinic], distances: DistanceIndex) -> List[RankedClinic]:
    """Attach each clinic's distance, keeping the given order."""
    return [to_ranked_clinic(clinic, distances) for clinic in clinics]


def to_response_payload(ranked: Iterable[RankedClinic]) -> List[Dict[str, Any]]:
    """Convert ranked clinics into JSON-ready dictionaries."""
    return [asdict(item) for item in ranked]
