import json
import pytest


# ============================
#  USTAWIENIA ENV
# ============================

RELAY_ENV_VARS = (
    "ZOOM_MEETING_ID",
    "ZOOM_ACCESS_TOKEN",
    "ZOOM_ACCOUNT_ID",
    "ZOOM_CLIENT_ID",
    "ZOOM_CLIENT_SECRET",
    "ZOOM_API_BASE_URL",
    "ZOOM_OAUTH_URL",
    "ZOOM_MAX_OCCURRENCE_DIFF_MINUTES",
    "ZOOM_ALLOW_MEETING_WIDE_REGISTRATION",
    "ZOHO_URL",
    "HTTP_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def env_setup(monkeypatch):
    # Zadbajmy, żeby w testach NIGDY nie poszło do prawdziwego Zoom/Zoho
    for var in RELAY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def zoom_env(monkeypatch):
    """
    Komplet konfiguracji dla wariantu OAuth.
    """
    monkeypatch.setenv("ZOOM_MEETING_ID", "85512345678")
    monkeypatch.setenv("ZOOM_ACCOUNT_ID", "acc-1")
    monkeypatch.setenv("ZOOM_CLIENT_ID", "client-1")
    monkeypatch.setenv("ZOOM_CLIENT_SECRET", "secret-1")


# ============================
#  FAKE HTTP (requests.get / requests.post)
# ============================

class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None, headers=None):
        self._payload = payload
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.headers = headers or {}

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


class FakeHttp:
    """
    Bardzo prosty substytut requests-mock:
        fake_http.add("GET", url, json=..., status_code=...)
        fake_http.add("POST", url, exc=requests.ConnectionError("boom"))
    Wszystkie wywołania trafiają do fake_http.calls.
    """

    def __init__(self):
        self._mappings = {}  # (method, url) -> FakeResponse | Exception
        self.calls = []

    def add(self, method, url, json=None, status_code=200, text=None, headers=None, exc=None):
        self._mappings[(method, url)] = exc or FakeResponse(json, status_code, text, headers)

    def _dispatch(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        key = (method, url)
        if key not in self._mappings:
            raise AssertionError(f"Unexpected {method} {url!r}")
        res = self._mappings[key]
        if isinstance(res, Exception):
            raise res
        return res

    def _fake_get(self, url, **kwargs):
        return self._dispatch("GET", url, **kwargs)

    def _fake_post(self, url, **kwargs):
        return self._dispatch("POST", url, **kwargs)

    def urls(self, method=None):
        return [c["url"] for c in self.calls if method is None or c["method"] == method]


@pytest.fixture()
def fake_http(monkeypatch):
    mock = FakeHttp()
    monkeypatch.setattr("requests.get", mock._fake_get)
    monkeypatch.setattr("requests.post", mock._fake_post)
    return mock


ZOOM_TOKEN_URL = "https://zoom.us/oauth/token"
ZOOM_MEETING_URL = "https://api.zoom.us/v2/meetings/85512345678"
ZOOM_REGISTRANTS_URL = ZOOM_MEETING_URL + "/registrants"


@pytest.fixture()
def zoom_api(fake_http):
    """
    Domyślny "szczęśliwy" Zoom: token, spotkanie z dwoma wystąpieniami,
    rejestracja OK. Testy nadpisują pojedyncze mapowania przez fake_http.add.
    """
    fake_http.add("POST", ZOOM_TOKEN_URL, json={"access_token": "tok-123", "expires_in": 3599})
    fake_http.add(
        "GET",
        ZOOM_MEETING_URL,
        json={
            "id": 85512345678,
            "occurrences": [
                {"occurrence_id": "1", "start_time": "2024-05-01T09:59:00Z"},
                {"occurrence_id": "2", "start_time": "2024-05-02T10:00:00Z"},
            ],
        },
    )
    fake_http.add(
        "POST",
        ZOOM_REGISTRANTS_URL,
        status_code=201,
        json={
            "registrant_id": "reg-9",
            "id": 85512345678,
            "join_url": "https://zoom.us/w/85512345678?tk=abc",
        },
    )
    return fake_http
