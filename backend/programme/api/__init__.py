"""API routers."""

from programme.api import programme

__all__ = [
    "programme",
]
