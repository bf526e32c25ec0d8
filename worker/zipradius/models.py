"""Core data models shared by the clinic radius search pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class PartnerClinic:
    """One partner clinic row as stored in the ``partner_clinics`` table."""

    name: str
    address: str
    city: str
    state: str
    zipcode: str
    tier: str
    contact_email: Optional[str] = None
    contact_name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RankedClinic:
    """A ranked clinic as returned to callers, with its distance from the origin."""

    name: str
    address: str
    city: str
    state: str
    distance: float
    tier: str
    contact_email: Optional[str] = None
    contact_name: Optional[str] = None
