import logging
import os

# Lambda ma już handler na root loggerze – ustawiamy tylko poziom,
# lokalnie (pytest, skrypty) dokładamy basicConfig.
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

if not logging.getLogger().handlers:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s %(message)s")

logger = logging.getLogger("webinar_relay")
logger.setLevel(LOG_LEVEL)
