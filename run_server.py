#!/usr/bin/env python3
"""Run the vocadrill API server with uvicorn.

Host, port and auto-reload come from ``DRILL_HOST``, ``DRILL_PORT`` and
``DRILL_RELOAD``; storage and word source are read by the app at startup.
"""

import logging
import os

import uvicorn

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(level=logging.INFO)
    host = os.environ.get('DRILL_HOST', '0.0.0.0')
    port = int(os.environ.get('DRILL_PORT', '8000'))
    reload = os.environ.get('DRILL_RELOAD', '1') not in ('0', 'false', 'no')

    logger.info(f"Starting vocadrill server on {host}:{port} "
                f"(storage={os.environ.get('DRILL_STORAGE', 'file')})")
    uvicorn.run("server.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
