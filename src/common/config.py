"""
Konfiguracja aplikacji oparta o zmienne środowiskowe.
Udostępnia dataclass Settings, budowaną od nowa dla każdego requestu
i przekazywaną jawnie do serwisów:
- Settings.from_env()  – handler Zoom,
- Settings.for_zoho()  – relay Zoho (czyta tylko ZOHO_URL i timeout,
  więc zepsuta zmienna Zoom go nie blokuje).
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv

from .errors import ConfigError
from .logging import logger

# Ładujemy zmienne z .env (jeżeli plik istnieje).
load_dotenv(find_dotenv())


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw.strip())
    except ValueError:
        # logujemy nazwę zmiennej, klient dostaje ogólny komunikat
        logger.error({"config": "invalid_number", "variable": name})
        raise ConfigError("Server configuration error")


@dataclass
class Settings:
    """
    Zbiór ustawień konfiguracyjnych odczytywanych ze zmiennych środowiskowych.

    Pola są zgrupowane logicznie (Zoom, Zoho, HTTP).
    """

    # Zoom – spotkanie cykliczne, na którego wystąpienia rejestrujemy
    zoom_meeting_id: str = ""

    # Zoom – wariant ze statycznym tokenem
    zoom_access_token: str = ""

    # Zoom – Server-to-Server OAuth (account_credentials)
    zoom_account_id: str = ""
    zoom_client_id: str = ""
    zoom_client_secret: str = ""

    zoom_api_base_url: str = "https://api.zoom.us/v2"
    zoom_oauth_url: str = "https://zoom.us/oauth/token"

    # Polityka dopasowania wystąpienia
    zoom_max_occurrence_diff_minutes: int = 6 * 60
    zoom_allow_meeting_wide_registration: bool = True

    # Zoho
    zoho_url: str = ""

    # HTTP
    http_timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            zoom_meeting_id=os.getenv("ZOOM_MEETING_ID", ""),
            zoom_access_token=os.getenv("ZOOM_ACCESS_TOKEN", ""),
            zoom_account_id=os.getenv("ZOOM_ACCOUNT_ID", ""),
            zoom_client_id=os.getenv("ZOOM_CLIENT_ID", ""),
            zoom_client_secret=os.getenv("ZOOM_CLIENT_SECRET", ""),
            zoom_api_base_url=os.getenv("ZOOM_API_BASE_URL", "https://api.zoom.us/v2"),
            zoom_oauth_url=os.getenv("ZOOM_OAUTH_URL", "https://zoom.us/oauth/token"),
            zoom_max_occurrence_diff_minutes=_env_number(
                "ZOOM_MAX_OCCURRENCE_DIFF_MINUTES", "360", int
            ),
            zoom_allow_meeting_wide_registration=_env_bool(
                "ZOOM_ALLOW_MEETING_WIDE_REGISTRATION", "true"
            ),
            zoho_url=os.getenv("ZOHO_URL", ""),
            http_timeout_seconds=_env_number("HTTP_TIMEOUT_SECONDS", "10", float),
        )

    @classmethod
    def for_zoho(cls) -> "Settings":
        return cls(
            zoho_url=os.getenv("ZOHO_URL", ""),
            http_timeout_seconds=_env_number("HTTP_TIMEOUT_SECONDS", "10", float),
        )

    def missing_zoom_settings(self) -> list[str]:
        """
        Zwraca nazwy brakujących zmiennych dla handlera Zoom.

        Token: wystarczy ZOOM_ACCESS_TOKEN albo komplet
        ZOOM_ACCOUNT_ID / ZOOM_CLIENT_ID / ZOOM_CLIENT_SECRET.
        """
        missing = []
        if not self.zoom_meeting_id:
            missing.append("ZOOM_MEETING_ID")
        if not self.zoom_access_token:
            if not self.zoom_account_id:
                missing.append("ZOOM_ACCOUNT_ID")
            if not self.zoom_client_id:
                missing.append("ZOOM_CLIENT_ID")
            if not self.zoom_client_secret:
                missing.append("ZOOM_CLIENT_SECRET")
        return missing
