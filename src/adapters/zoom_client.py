# src/adapters/zoom_client.py
import urllib.parse
from typing import Any, Dict, Optional

import requests

from ..common.config import Settings
from ..common.errors import AuthError, UpstreamError
from ..common.logging import logger
from ..common.logging_utils import shorten_body


class ZoomClient:
    """
    Cienki klient Zoom REST API (v2) dla jednego requestu.

    Trzy wywołania, których potrzebuje rejestracja:
    - wymiana poświadczeń Server-to-Server OAuth na token,
    - GET /meetings/{id} (razem z listą occurrences),
    - POST /meetings/{id}/registrants (opcjonalnie z occurrence_ids).
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.base_url = settings.zoom_api_base_url.rstrip("/")
        self.timeout = settings.http_timeout_seconds
        self.logger = logger

    def _meeting_url(self, suffix: str = "") -> str:
        meeting_id = urllib.parse.quote(str(self.settings.zoom_meeting_id), safe="")
        return f"{self.base_url}/meetings/{meeting_id}{suffix}"

    def _headers(self, token: str) -> dict:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def get_access_token(self) -> str:
        """
        POST https://zoom.us/oauth/token?grant_type=account_credentials&account_id=...
        z Basic auth (client_id:client_secret).

        Bez retry – każdy błąd to AuthError.
        """
        params = {
            "grant_type": "account_credentials",
            "account_id": self.settings.zoom_account_id,
        }
        try:
            resp = requests.post(
                self.settings.zoom_oauth_url,
                params=params,
                auth=(self.settings.zoom_client_id, self.settings.zoom_client_secret),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.logger.error({"zoom": "token_request_error", "error": str(e)})
            raise AuthError(f"Zoom token error: {e}")

        if not resp.ok:
            self.logger.error(
                {"zoom": "token_error", "status": resp.status_code, "body": shorten_body(resp.text)}
            )
            raise AuthError(f"Zoom token error: {resp.status_code} {resp.text}")

        try:
            data = resp.json()
        except ValueError:
            data = {}

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise AuthError("Zoom token response missing access_token")

        self.logger.info({"zoom": "token_ok", "expires_in": data.get("expires_in")})
        return token

    def get_meeting(self, token: str) -> Dict[str, Any]:
        url = self._meeting_url()
        try:
            resp = requests.get(url, headers=self._headers(token), timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error({"zoom": "get_meeting_request_error", "error": str(e)})
            raise UpstreamError("Failed to fetch Zoom meeting details")

        if not resp.ok:
            self.logger.error(
                {
                    "zoom": "get_meeting_error",
                    "status": resp.status_code,
                    "body": shorten_body(resp.text),
                }
            )
            raise UpstreamError("Failed to fetch Zoom meeting details")

        try:
            data = resp.json()
        except ValueError:
            self.logger.error({"zoom": "get_meeting_bad_json", "body": shorten_body(resp.text)})
            raise UpstreamError("Failed to fetch Zoom meeting details")

        self.logger.info(
            {
                "zoom": "get_meeting_ok",
                "occurrences": len(data.get("occurrences") or []) if isinstance(data, dict) else 0,
            }
        )
        return data if isinstance(data, dict) else {}

    def add_registrant(
        self,
        token: str,
        payload: Dict[str, Any],
        occurrence_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        url = self._meeting_url("/registrants")
        params = {"occurrence_ids": occurrence_id} if occurrence_id else None
        try:
            resp = requests.post(
                url,
                json=payload,
                params=params,
                headers=self._headers(token),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.logger.error({"zoom": "add_registrant_request_error", "error": str(e)})
            raise UpstreamError("Zoom registration failed")

        if not resp.ok:
            self.logger.error(
                {
                    "zoom": "add_registrant_error",
                    "status": resp.status_code,
                    "body": shorten_body(resp.text),
                }
            )
            raise UpstreamError("Zoom registration failed")

        try:
            data = resp.json()
        except ValueError:
            data = {}
        return data if isinstance(data, dict) else {}
