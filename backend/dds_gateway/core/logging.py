import logging
from dds_gateway.core.config import settings

logger = logging.getLogger("dds-gateway")
logger.setLevel(settings.DDS_LOG_LEVEL.upper())

handler = logging.StreamHandler()
formatter = logging.Formatter("[%(levelname)s] %(asctime)s - %(message)s")
handler.setFormatter(formatter)

# the module may be re-imported by reloaders; attach the handler once
if not logger.handlers:
    logger.addHandler(handler)
