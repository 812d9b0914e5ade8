"""Utility modules."""

from .retry import transport_retrying

__all__ = ["transport_retrying"]
