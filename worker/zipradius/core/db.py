"""Database helpers for the worker."""

import logging
from contextlib import contextmanager
from typing import Iterable, List, Optional

from psycopg2 import extras, pool

from zipradius.core.config import get_settings
from zipradius.etl.transform import to_partner_clinic
from zipradius.models import PartnerClinic
from zipradius.ranking.tiers import TIER_VALUES

logger = logging.getLogger(__name__)

_connection_pool: Optional[pool.SimpleConnectionPool] = None


def init_pool(minconn: int = 1, maxconn: int = 5) -> pool.SimpleConnectionPool:
    """Initialise and return the shared connection pool."""
    global _connection_pool
    if _connection_pool is None:
        settings = get_settings()
        if not settings.database_url:
            raise RuntimeError("DATABASE_URL is required for database connections")
        _connection_pool = pool.SimpleConnectionPool(
            minconn,
            maxconn,
            dsn=settings.database_url,
            connect_timeout=10,
        )
        logger.info("Database connection pool initialised")
    return _connection_pool


@contextmanager
def get_connection():
    """Context manager yielding a pooled connection."""
    pg_pool = init_pool()
    conn = pg_pool.getconn()
    try:
        yield conn
    finally:
        pg_pool.putconn(conn)


_SELECT_PARTNER_CLINICS = """
SELECT
    name,
    address,
    city,
    state,
    zipcode,
    tier,
    contact_email,
    contact_name
FROM partner_clinics
WHERE zipcode = ANY(%(zipcodes)s)
  AND tier = ANY(%(tiers)s)
ORDER BY tier ASC;
"""


def fetch_partner_clinics(zipcodes: Iterable[str]) -> List[PartnerClinic]:
    """Return clinics located in ``zipcodes`` with a recognised tier, ordered by tier."""
    zipcode_list = list(dict.fromkeys(zipcodes))
    if not zipcode_list:
        return []

    params = {"zipcodes": zipcode_list, "tiers": list(TIER_VALUES)}
    with get_connection() as conn:
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(_SELECT_PARTNER_CLINICS, params)
            rows = cur.fetchall()

    logger.info("Fetched %d partner clinics across %d ZIP codes", len(rows), len(zipcode_list))
    return [to_partner_clinic(row) for row in rows]
