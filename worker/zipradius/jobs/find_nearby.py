"""CLI job that finds partner clinics near a ZIP code, ranked by tier and distance."""

import argparse
import json
import logging
import math
from typing import List, Optional

from zipradius.core.config import get_settings
from zipradius.core.db import fetch_partner_clinics
from zipradius.models import RankedClinic
from zipradius.ranking.distance_index import DistanceIndex
from zipradius.ranking.formatter import to_response_payload
from zipradius.ranking.ranker import rank
from zipradius.vendors import zipcode_api

logger = logging.getLogger(__name__)


class InvalidSearchError(ValueError):
    """Raised when the origin, radius or units of a search are unusable."""


def find_clinics_in_radius(
    *,
    zipcode: str,
    radius: float,
    units: Optional[str] = None,
) -> List[RankedClinic]:
    """Look up clinics within ``radius`` of ``zipcode``: tier A first, nearest first within a tier.

    An unavailable radius search yields an empty list; no clinics are fetched
    or ranked in that case.
    """
    settings = get_settings()

    zipcode = (zipcode or "").strip()
    if not zipcode:
        raise InvalidSearchError("zipcode must not be empty")
    try:
        radius = float(radius)
    except (TypeError, ValueError):
        raise InvalidSearchError("radius must be numeric") from None
    if not (radius > 0 and math.isfinite(radius)):
        raise InvalidSearchError("radius must be a positive finite number")
    units = (units or settings.default_radius_units).strip().lower()
    if units not in zipcode_api.SUPPORTED_UNITS:
        raise InvalidSearchError(f"units must be one of: {', '.join(sorted(zipcode_api.SUPPORTED_UNITS))}")

    api_key = settings.zip_code_api_key
    if not api_key:
        raise RuntimeError("ZIP_CODE_API_KEY is required")

    logger.info("Searching clinics within %s %s of %s", radius, units, zipcode)
    payload = zipcode_api.radius_search(
        zipcode,
        radius,
        api_key=api_key,
        units=units,
        base_url=settings.zip_code_api_url,
    )
    if payload is None:
        logger.warning("Radius search unavailable for zipcode=%s; returning no clinics.", zipcode)
        return []

    distances = DistanceIndex.from_radius_payload(payload, unit=units)
    if not distances:
        logger.info("No ZIP codes within radius of %s", zipcode)
        return []

    clinics = fetch_partner_clinics(distances.identifiers)
    ranked = rank(clinics, distances)
    logger.info("Completed search: clinics=%d zipcodes=%d", len(ranked), len(distances))
    return ranked


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find partner clinics near a ZIP code")
    parser.add_argument("zipcode", help="Origin ZIP code")
    parser.add_argument("radius", type=float, help="Search radius")
    parser.add_argument(
        "--units",
        dest="units",
        choices=sorted(zipcode_api.SUPPORTED_UNITS),
        default=get_settings().default_radius_units,
        help="Radius units",
    )
    return parser


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args()
    try:
        ranked = find_clinics_in_radius(zipcode=args.zipcode, radius=args.radius, units=args.units)
    except InvalidSearchError as exc:
        parser.error(str(exc))
    print(json.dumps(to_response_payload(ranked), indent=2))


if __name__ == "__main__":
    main()
