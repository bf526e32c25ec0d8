import pytest

from zipradius.models import PartnerClinic
from zipradius.ranking import formatter, ranker
from zipradius.ranking.distance_index import DataIntegrityError, DistanceIndex
from zipradius.ranking.tiers import tier_rank


@pytest.fixture
def clinics():
    return [
        PartnerClinic("Name1", "Address1", "City1", "State1", "54321", "A", "email1@example.com", "Name1"),
        PartnerClinic("Name2", "Address2", "City2", "State2", "67890", "B", "email2@example.com", "Name2"),
        PartnerClinic("Name3", "Address3", "City3", "State3", "12345", "C", "email3@example.com", "Name3"),
    ]


@pytest.fixture
def distances():
    return DistanceIndex([("12345", 3), ("54321", 5), ("67890", 8)])


def test_format_response_matches_payload_shape(clinics, distances):
    payload = formatter.to_response_payload(formatter.format_response(clinics, distances))

    assert payload == [
        {"name": "Name1", "address": "Address1", "city": "City1", "state": "State1", "distance": 5.0,
         "tier": "A", "contact_email": "email1@example.com", "contact_name": "Name1"},
        {"name": "Name2", "address": "Address2", "city": "City2", "state": "State2", "distance": 8.0,
         "tier": "B", "contact_email": "email2@example.com", "contact_name": "Name2"},
        {"name": "Name3", "address": "Address3", "city": "City3", "state": "State3", "distance": 3.0,
         "tier": "C", "contact_email": "email3@example.com", "contact_name": "Name3"},
    ]


def test_format_response_does_not_reorder(clinics, distances):
    reversed_clinics = list(reversed(clinics))

    names = [item.name for item in formatter.format_response(reversed_clinics, distances)]

    assert names == ["Name3", "Name2", "Name1"]


def test_missing_distance_is_not_defaulted(clinics):
    with pytest.raises(DataIntegrityError):
        formatter.format_response(clinics, DistanceIndex([("54321", 5)]))


def test_formatted_output_reproduces_ranking_order(clinics, distances):
    shuffled = [clinics[2], clinics[0], clinics[1]]
    payload = formatter.to_response_payload(ranker.rank(shuffled, distances))

    keys = [(tier_rank(item["tier"]), item["distance"]) for item in payload]

    assert keys == sorted(keys)
    assert [item["name"] for item in payload] == [c.name for c in ranker.sort_clinics(shuffled, distances)]
