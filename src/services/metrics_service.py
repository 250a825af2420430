from ..common.logging import logger


class MetricsService:
    """
    Liczniki jako linie logu (bez backendu metryk), np.
    {"metric": "relay.zoom_registration", "value": 1, "status": "OK"}
    """

    def __init__(self, namespace: str = "relay"):
        self.namespace = namespace

    def incr(self, name: str, value: int = 1, **labels) -> dict:
        line = {"metric": f"{self.namespace}.{name}", "value": value, **labels}
        logger.info(line)
        return line
