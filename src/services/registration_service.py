# src/services/registration_service.py
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from ..adapters.zoom_client import ZoomClient
from ..common.config import Settings
from ..common.errors import ConfigError, ValidationError
from ..common.logging import logger
from ..common.logging_utils import mask_email
from ..domain.models import OccurrenceMatch, RegistrationRequest, RegistrationResult
from .occurrence_service import occurrences_from_meeting, parse_timestamp, select_occurrence

MISSING_FIELDS_ERROR = "Missing required fields: fullName, email, sessionTimeSelected"
INVALID_TIME_ERROR = "Invalid sessionTimeSelected timestamp"


def split_full_name(full_name: Any) -> Tuple[str, str]:
    """
    "Jane Q Public" -> ("Jane", "Q Public"), "Solo" -> ("Solo", "").
    """
    parts = str(full_name).split()
    first_name = parts[0] if parts else ""
    last_name = " ".join(parts[1:])
    return first_name, last_name


def build_registrant_payload(
    email: str,
    first_name: str,
    last_name: str,
    role: Optional[str] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
    }
    # Zoom zapisze rolę tylko, jeśli w ustawieniach rejestracji jest pytanie "Role"
    if role:
        payload["custom_questions"] = [{"title": "Role", "value": role}]
    return payload


class RegistrationService:
    """
    Rejestracja uczestnika na wystąpienie spotkania cyklicznego Zoom.

    Kroki (każdy przerywa pipeline wyjątkiem z common.errors):
    1. walidacja pól requestu (+ parsowanie sessionTimeSelected),
    2. walidacja konfiguracji,
    3. rozbicie imienia i nazwiska,
    4. token (statyczny albo OAuth),
    5. pobranie spotkania z listą occurrences,
    6. dopasowanie wystąpienia,
    7-8. payload + POST registrants,
    9. wynik dla klienta.
    """

    def __init__(self, settings: Settings, zoom_client: Optional[ZoomClient] = None) -> None:
        self.settings = settings
        self.zoom = zoom_client or ZoomClient(settings)

    def validate_request(self, req: RegistrationRequest) -> datetime:
        if not req.full_name or not req.email or not req.session_time_selected:
            raise ValidationError(MISSING_FIELDS_ERROR)

        target = parse_timestamp(req.session_time_selected)
        if target is None:
            raise ValidationError(INVALID_TIME_ERROR)
        return target

    def validate_config(self) -> None:
        missing = self.settings.missing_zoom_settings()
        if missing:
            # logujemy tylko nazwy, nigdy wartości
            logger.error({"zoom": "config_missing", "missing": missing})
            raise ConfigError("Server configuration error")

    def resolve_token(self) -> str:
        if self.settings.zoom_access_token:
            return self.settings.zoom_access_token
        return self.zoom.get_access_token()

    def match_occurrence(self, token: str, target: datetime) -> Optional[OccurrenceMatch]:
        meeting = self.zoom.get_meeting(token)
        occurrences = occurrences_from_meeting(meeting)
        return select_occurrence(
            target,
            occurrences,
            max_diff=timedelta(minutes=self.settings.zoom_max_occurrence_diff_minutes),
            allow_meeting_wide=self.settings.zoom_allow_meeting_wide_registration,
        )

    def register(self, req: RegistrationRequest) -> RegistrationResult:
        target = self.validate_request(req)
        self.validate_config()

        first_name, last_name = split_full_name(req.full_name)
        token = self.resolve_token()

        match = self.match_occurrence(token, target)
        occurrence_id = match.occurrence.occurrence_id if match else ""

        payload = build_registrant_payload(req.email, first_name, last_name, req.role)
        data = self.zoom.add_registrant(token, payload, occurrence_id=occurrence_id or None)

        result = RegistrationResult(
            success=True,
            join_url=data.get("join_url") or "",
            registrant_id=str(data.get("registrant_id") or data.get("id") or ""),
            occurrence_id=occurrence_id,
            matched_start_time=match.occurrence.start_time if match else "",
        )
        logger.info(
            {
                "zoom": "registered",
                "email": mask_email(str(req.email)),
                "occurrence_id": occurrence_id,
                "registrant_id": result.registrant_id,
            }
        )
        return result
