"""
Pomocnicze funkcje dla eventów API Gateway (REST i HTTP API v2).

- odczyt metody HTTP,
- dekodowanie body (także base64) do surowych bajtów,
- budowanie odpowiedzi JSON / tekstowych.
"""

import base64
import binascii
import json
from typing import Any, Dict, Optional

from .errors import ValidationError
from .utils import to_json


def get_method(event: dict) -> str:
    method = event.get("httpMethod")
    if not method:
        # HTTP API (payload v2) trzyma metodę w requestContext.http
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or "").upper()


def get_raw_body(event: dict) -> bytes:
    """
    Body dokładnie tak, jak przyszło – bez dekodowania do str,
    żeby relay nie zmieniał bajtów spoza UTF-8.
    """
    body_raw = event.get("body") or ""
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body_raw, validate=True)
        except (binascii.Error, ValueError):
            raise ValidationError("Invalid base64 body")
    return body_raw.encode("utf-8")


def parse_json_body(event: dict) -> Dict[str, Any]:
    """
    Zwraca body jako słownik.

    Puste body albo JSON niebędący obiektem traktujemy jak {},
    niepoprawny JSON (także złe kodowanie) kończy się ValidationError (400).
    """
    body_raw = get_raw_body(event)
    if not body_raw:
        return {}
    try:
        data = json.loads(body_raw)
    except ValueError:
        raise ValidationError("Invalid JSON body")
    return data if isinstance(data, dict) else {}


def json_response(status_code: int, payload: Any, headers: Optional[dict] = None) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **(headers or {})},
        "body": to_json(payload),
    }


def text_response(status_code: int, body: str, content_type: str = "text/plain") -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": content_type},
        "body": body,
    }


def method_not_allowed(payload: Any) -> dict:
    return json_response(405, payload, headers={"Allow": "POST"})
