"""
Serve command: Run the HTTP API.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

import vaultviews.app as app


def cmd_serve(args: argparse.Namespace) -> int:
    """
    Serve the views API with uvicorn until interrupted.
    """
    config = app.application.config
    host = args.host or config.get("host", "127.0.0.1")
    port = args.port or int(config.get("port", 8357))

    # Build the views service now so config errors surface before binding
    app.application.get_service("views")

    logging.info(f"[cli] Starting vaultviews API on {host}:{port}")
    uvicorn.run("vaultviews.interfaces.api.api_app:api_app", host=host, port=port, log_level="info")
    return 0
