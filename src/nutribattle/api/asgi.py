"""ASGI entrypoint for the NutriBattle API.

Serve with ``uvicorn nutribattle.api.asgi:build_app --factory`` so settings
are read when the server starts rather than on import.
"""

from fastapi import FastAPI

from nutribattle.api.app import create_app
from nutribattle.config import Settings
from nutribattle.containers import build_container


def build_app(settings: Settings | None = None) -> FastAPI:
    """Build the API backed by the Supabase catalog."""
    return create_app(build_container(settings))
