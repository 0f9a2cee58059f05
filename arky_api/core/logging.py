from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once; later calls are no-ops (basicConfig semantics)."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
