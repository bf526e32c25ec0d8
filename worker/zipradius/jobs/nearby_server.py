"""HTTP entrypoint that serves ranked partner clinic searches."""

from __future__ import annotations

import logging
import os
from typing import Any

from flask import Flask, jsonify, request

from zipradius.core.config import get_settings
from zipradius.jobs.find_nearby import InvalidSearchError, find_clinics_in_radius
from zipradius.ranking.formatter import to_response_payload

# ---------- Logging ----------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ---------- App ----------
app = Flask(__name__)


# ---------- Routes ----------
@app.get("/healthz")
def healthcheck() -> Any:
    """Lightweight health endpoint; reads settings only, no DB or API calls."""
    settings = get_settings()
    return (
        jsonify(
            {
                "status": "ok",
                "worker_port_config": settings.worker_port,
                "revision": os.getenv("K_REVISION", "unknown"),
            }
        ),
        200,
    )


@app.get("/clinics/nearby")
def nearby_clinics() -> Any:
    """
    Rank partner clinics around a ZIP code.

    Required query params: zipcode, radius
    Optional: units ("mile" or "km")
    """
    zipcode = (request.args.get("zipcode") or "").strip()
    radius_raw = request.args.get("radius")
    units = request.args.get("units")

    missing = [name for name, value in (("zipcode", zipcode), ("radius", radius_raw)) if not value]
    if missing:
        return jsonify({"error": f"missing fields: {', '.join(missing)}"}), 400

    try:
        radius = float(radius_raw)
    except (TypeError, ValueError):
        return jsonify({"error": "radius must be numeric"}), 400

    try:
        ranked = find_clinics_in_radius(zipcode=zipcode, radius=radius, units=units)
    except InvalidSearchError as exc:
        return jsonify({"error": str(exc)}), 400
    except Exception as exc:  # noqa: BLE001
        logger.exception("Clinic search failed for zipcode=%s: %s", zipcode, exc)
        return jsonify({"error": "clinic search failed"}), 500

    return jsonify({"data": to_response_payload(ranked)}), 200


def main() -> None:
    port = int(os.getenv("PORT") or get_settings().worker_port)
    logger.info("[BOOT] Binding on 0.0.0.0:%d", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
