"""HTTP inspection surface for WAVE containers."""

from riffwave.api.server import create_app

__all__ = ["create_app"]
