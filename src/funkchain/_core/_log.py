import logging

logger = logging.getLogger("funkchain")
