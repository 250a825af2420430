"""
Wyjątki domenowe. Każdy niesie status HTTP, na który handler
zamienia go na granicy Lambdy.
"""


class RelayError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(RelayError):
    """Brakujące albo błędne dane wejściowe."""

    status_code = 400
    default_message = "Invalid request"


class ConfigError(RelayError):
    """Brak wymaganej konfiguracji wdrożenia."""

    default_message = "Server configuration error"


class AuthError(RelayError):
    """Nieudana wymiana poświadczeń na token."""

    default_message = "Zoom authentication failed"


class UpstreamError(RelayError):
    """Niepoprawna odpowiedź API Zoom (pobranie spotkania / rejestracja)."""

    default_message = "Zoom request failed"


class ProxyError(RelayError):
    """Błąd transportu przy przekazywaniu requestu dalej."""

    default_message = "Zoho proxy error"
