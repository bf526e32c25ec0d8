import pytest
import requests

from zipradius.vendors import zipcode_api


class DummyResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class DummySession:
    def __init__(self):
        self.calls = []
        self.response = None
        self.error = None

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def patch_session(monkeypatch):
    session = DummySession()
    monkeypatch.setattr(zipcode_api, "_SESSION", session)
    return session


def test_build_radius_url():
    url = zipcode_api.build_radius_url("12345", 10.0, "secret", "km", base_url="https://zip.example.com/rest/")

    assert url == "https://zip.example.com/rest/secret/radius.json/12345/10/km"


def test_radius_search_success(patch_session):
    patch_session.response = DummyResponse(payload={"zip_codes": [{"zip_code": "12345", "distance": 3}]})

    payload = zipcode_api.radius_search("12345", 10, "secret")

    assert payload["zip_codes"][0]["zip_code"] == "12345"
    url, timeout = patch_session.calls[0]
    assert url.endswith("/secret/radius.json/12345/10/mile")
    assert timeout == 10


def test_radius_search_network_error_returns_none(patch_session, caplog):
    patch_session.error = requests.ConnectionError("boom")

    with caplog.at_level("ERROR"):
        assert zipcode_api.radius_search("12345", 10, "secret") is None

    assert "radius_search failed" in " ".join(caplog.messages)


def test_radius_search_non_2xx_returns_none(patch_session):
    patch_session.response = DummyResponse(status_code=401, payload={"error_code": 401}, text="unauthorized")

    assert zipcode_api.radius_search("12345", 10, "secret") is None


def test_radius_search_invalid_json_returns_none(patch_session):
    patch_session.response = DummyResponse(payload=ValueError("not json"))

    assert zipcode_api.radius_search("12345", 10, "secret") is None


@pytest.mark.parametrize(
    "payload",
    [
        {"error_code": 404, "error_msg": "Zip code not found."},
        {"results": []},
        ["12345"],
    ],
)
def test_radius_search_unusable_payload_returns_none(patch_session, payload):
    patch_session.response = DummyResponse(payload=payload)

    assert zipcode_api.radius_search("12345", 10, "secret") is None


@pytest.mark.parametrize(
    "radius, segment",
    [
        (1500000.0, "1500000"),
        (12.3456789, "12.3456789"),
        (0.0000001, "0.0000001"),
        (2.5, "2.5"),
        (25, "25"),
    ],
)
def test_build_radius_url_keeps_radius_exact(radius, segment):
    url = zipcode_api.build_radius_url("12345", radius, "k")

    assert url.endswith(f"/k/radius.json/12345/{segment}/mile")
    assert "e" not in url.rsplit("/", 2)[1].lower()
