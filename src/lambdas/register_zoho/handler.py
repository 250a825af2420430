"""
Lambda przekazująca formularz do webhooka Zoho (ZOHO_URL).

Body idzie dalej bez zmian, a status i treść odpowiedzi Zoho wracają
do klienta 1:1 (łatwiej debugować po stronie formularza).
"""

from ...adapters.zoho_client import ZohoClient
from ...common.config import Settings
from ...common.errors import RelayError
from ...common.http import get_method, get_raw_body, json_response, method_not_allowed, text_response
from ...common.logging import logger
from ...common.logging_utils import shorten_body
from ...services.metrics_service import MetricsService


metrics = MetricsService()


def lambda_handler(event, context):
    if get_method(event) != "POST":
        return method_not_allowed({"error": "Method not allowed"})

    try:
        zoho = ZohoClient(Settings.for_zoho())
        resp = zoho.forward(get_raw_body(event))

        text = resp.text or ""
        metrics.incr("zoho_relay", status=resp.status_code)
        logger.info(
            {"handler": "register_zoho", "status": resp.status_code, "body": shorten_body(text)}
        )
        return text_response(
            resp.status_code,
            text or "ok",
            content_type=resp.headers.get("Content-Type") or "text/plain",
        )

    except RelayError as e:
        metrics.incr("zoho_relay", status=type(e).__name__)
        return json_response(e.status_code, {"error": e.message})

    except Exception as e:
        logger.exception({"handler": "register_zoho", "error": str(e)})
        return json_response(500, {"error": str(e) or "Zoho proxy error"})
