"""API clients for the Bitvavo exchange."""

from .bitvavo_client import BitvavoClient

__all__ = ["BitvavoClient"]
