"""Host-facing handlers."""

from .playground import PlaygroundHandler

__all__ = ["PlaygroundHandler"]
