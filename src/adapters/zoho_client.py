import requests

from ..common.config import Settings
from ..common.errors import ConfigError, ProxyError
from ..common.logging import logger


class ZohoClient:
    def __init__(self, settings: Settings):
        self.url = settings.zoho_url
        self.timeout = settings.http_timeout_seconds

    def forward(self, body_raw: bytes) -> requests.Response:
        """
        Przekazuje surowe body (JSON) na webhook Zoho i zwraca odpowiedź
        bez żadnej interpretacji – status i treść oddaje handler.
        """
        if not self.url:
            logger.error({"zoho": "url_missing"})
            raise ConfigError("ZOHO_URL is not set")

        try:
            return requests.post(
                self.url,
                data=body_raw,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error({"zoho": "forward_error", "error": str(e)})
            raise ProxyError(str(e) or None)
