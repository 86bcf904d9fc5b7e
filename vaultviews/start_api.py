#!/usr/bin/env python3
"""
vaultviews API starter
Runs the views API with settings from config.
"""

import logging

import uvicorn

from vaultviews.app import application
from vaultviews.helpers.logging_helper import configure_logging

if __name__ == "__main__":
    configure_logging(application.config.get("log_level", "INFO"))
    host = application.config.get("host", "127.0.0.1")
    port = int(application.config.get("port", 8357))
    logging.info(f"Starting vaultviews API on {host}:{port}...")

    uvicorn.run("vaultviews.interfaces.api.api_app:api_app", host=host, port=port, log_level="info")
