"""Utilities for transforming ZIP code API responses and clinic rows."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from zipradius.models import PartnerClinic

logger = logging.getLogger(__name__)


def _strip_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    value_str = str(value).strip()
    return value_str or None


def extract_zip_distances(payload: Optional[Dict[str, Any]]) -> List[Tuple[str, Any]]:
    """Return ``(zip_code, distance)`` pairs from a ``radius.json`` payload, in response order."""
    pairs: List[Tuple[str, Any]] = []
    for item in (payload or {}).get("zip_codes") or []:
        if not isinstance(item, dict):
            logger.debug("Skipping non-object radius entry: %s", item)
            continue
        zipcode = _strip_or_none(item.get("zip_code"))
        distance = item.get("distance")
        if not zipcode or distance is None:
            logger.debug("Skipping radius entry without zip_code/distance: %s", item)
            continue
        pairs.append((zipcode, distance))
    return pairs


def to_partner_clinic(row: Mapping[str, Any]) -> PartnerClinic:
    return PartnerClinic(
        name=row.get("name") or "",
        address=row.get("address") or "",
        city=row.get("city") or "",
        state=row.get("state") or "",
        zipcode=_strip_or_none(row.get("zipcode")) or "",
        tier=row.get("tier"),
        contact_email=_strip_or_none(row.get("contact_email")),
        contact_name=_strip_or_none(row.get("contact_name")),
    )
