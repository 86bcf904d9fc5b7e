"""
FastAPI application setup and configuration.
Main entry point for the vaultviews API service.

All routes live under the /api prefix.
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse

from vaultviews.__version__ import __version__
from vaultviews.helpers.logging_helper import sanitize_exception_message
from vaultviews.interfaces.api import web

# ----------------------------------------------------------------------
#  FastAPI app
# ----------------------------------------------------------------------
api_app = FastAPI(title="vaultviews", version=__version__)


# Global exception handler
@api_app.exception_handler(Exception)
async def exception_handler(request, exc: Exception):
    return JSONResponse(status_code=500, content={"error": sanitize_exception_message(exc)})


api_router = APIRouter(prefix="/api")
api_router.include_router(web.router)
api_app.include_router(api_router)
