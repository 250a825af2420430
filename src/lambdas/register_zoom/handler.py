"""
Lambda rejestrująca uczestnika na wystąpienie spotkania cyklicznego Zoom.

Body (JSON): { fullName, email, role?, sessionTimeSelected }

Wymagane env:
- ZOOM_MEETING_ID,
- ZOOM_ACCESS_TOKEN albo ZOOM_ACCOUNT_ID / ZOOM_CLIENT_ID / ZOOM_CLIENT_SECRET.

Odpowiedź: { success, join_url, registrant_id, occurrence_id, matched_start_time }
albo { success: false, error } z kodem 400 / 500.
"""

from ...common.config import Settings
from ...common.errors import RelayError
from ...common.http import get_method, json_response, method_not_allowed, parse_json_body
from ...common.logging import logger
from ...domain.models import RegistrationRequest, RegistrationResult
from ...services.metrics_service import MetricsService
from ...services.registration_service import RegistrationService


metrics = MetricsService()


def _error(status_code: int, message: str) -> dict:
    return json_response(status_code, RegistrationResult(success=False, error=message).to_dict())


def lambda_handler(event, context):
    if get_method(event) != "POST":
        return method_not_allowed({"success": False, "error": "Method not allowed"})

    try:
        body = parse_json_body(event)
        req = RegistrationRequest.from_body(body)

        service = RegistrationService(Settings.from_env())
        result = service.register(req)

        metrics.incr("zoom_registration", status="OK")
        return json_response(200, result.to_dict())

    except RelayError as e:
        metrics.incr("zoom_registration", status=type(e).__name__)
        logger.warning({"handler": "register_zoom", "status": e.status_code, "error": e.message})
        return _error(e.status_code, e.message)

    except Exception as e:
        metrics.incr("zoom_registration", status="ERROR")
        logger.exception({"handler": "register_zoom", "error": str(e)})
        return _error(500, str(e) or "Internal server error")
