"""Client utilities for the zipcodeapi.com radius endpoint."""

import logging
from decimal import Decimal
from typing import Any, Dict, Optional

import requests

from zipradius.core.config import DEFAULT_ZIP_CODE_API_URL

logger = logging.getLogger(__name__)

_SESSION = requests.Session()
_SESSION.headers.update({"Content-Type": "application/json"})

SUPPORTED_UNITS = frozenset({"mile", "km"})


def _format_radius(radius: float) -> str:
    """Render the radius as a plain decimal path segment without rounding or exponents."""
    radius = float(radius)
    if radius.is_integer():
        return str(int(radius))
    return format(Decimal(repr(radius)), "f")


def build_radius_url(
    zipcode: str,
    radius: float,
    api_key: str,
    units: str = "mile",
    base_url: str = DEFAULT_ZIP_CODE_API_URL,
) -> str:
    return f"{base_url.rstrip('/')}/{api_key}/radius.json/{zipcode}/{_format_radius(radius)}/{units}"


def radius_search(
    zipcode: str,
    radius: float,
    api_key: str,
    units: str = "mile",
    base_url: str = DEFAULT_ZIP_CODE_API_URL,
) -> Optional[Dict[str, Any]]:
    """Return the decoded radius response, or None when the search could not be completed.

    Failures are logged rather than raised: callers treat a missing response as
    "no clinics nearby".
    """
    url = build_radius_url(zipcode, radius, api_key, units, base_url)
    try:
        response = _SESSION.get(url, timeout=10)
    except requests.RequestException as exc:
        logger.error("radius_search failed for zipcode=%s: %s", zipcode, exc)
        return None

    if not (200 <= response.status_code < 300):
        logger.error(
            "radius_search returned non-2xx status (%s) for zipcode=%s: %s",
            response.status_code,
            zipcode,
            response.text[:500],
        )
        return None

    try:
        payload = response.json()
    except ValueError as exc:
        logger.error("radius_search returned invalid JSON for zipcode=%s: %s", zipcode, exc)
        return None

    if not isinstance(payload, dict) or "error_code" in payload:
        logger.error("radius_search error payload for zipcode=%s: %s", zipcode, str(payload)[:500])
        return None
    if not isinstance(payload.get("zip_codes"), list):
        logger.warning("radius_search payload missing zip_codes list. keys=%s", list(payload.keys())[:10])
        return None

    logger.info("radius_search found %d ZIP codes within %s %s of %s", len(payload["zip_codes"]), radius, units, zipcode)
    return payload
