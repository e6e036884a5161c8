"""Single-page portfolio site served by Flask."""

from .app import create_app

__all__ = ["create_app"]
