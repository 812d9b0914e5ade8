"""Integration tests against the live Bitvavo API.

These tests perform real network calls and are skipped unless
BITVAVO_LIVE_TESTS=1. Authenticated tests additionally need
BITVAVO_API_KEY and BITVAVO_API_SECRET.

Run with: BITVAVO_LIVE_TESTS=1 pytest -m integration
Skip with: pytest -m "not integration"
"""
