"""FastAPI REST API over the title index."""

from moviefinder.api.app import create_app

__all__ = ["create_app"]
