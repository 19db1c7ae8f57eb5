"""Run the relay with uvicorn on the fixed port."""
from __future__ import annotations
import logging
import os

import uvicorn

from marketai.common.logging_setup import setup_logging

LOGGER = logging.getLogger("marketai.serve.server")

PORT = 3001


def main() -> None:
    setup_logging()
    host = os.getenv("RELAY_HOST", "0.0.0.0")
    LOGGER.info("API server running on port %s", PORT)
    # log_config=None keeps the handler installed by setup_logging.
    uvicorn.run("marketai.serve.relay_app:app", host=host, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
