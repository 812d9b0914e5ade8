"""Tests for error translation."""

import ccxt
import pytest

from bitvavo_api.errors import (
    BitvavoApiError,
    BitvavoAuthenticationError,
    BitvavoError,
    BitvavoRateLimitError,
    BitvavoTransportError,
    parse_error_body,
    translate_error,
)


class TestParseErrorBody:
    """Tests for extracting the exchange error body from ccxt messages."""

    def test_parses_error_code_and_message(self):
        code, message = parse_error_body(
            'bitvavo {"errorCode":205,"error":"market parameter is invalid."}'
        )

        assert code == 205
        assert message == "market parameter is invalid."

    def test_parses_body_after_http_status_prefix(self):
        code, message = parse_error_body(
            'bitvavo GET https://api.bitvavo.com/v2/ticker/price?market=BAD 400 Bad Request '
            '{"errorCode":205,"error":"market parameter is invalid."}'
        )

        assert code == 205
        assert message == "market parameter is invalid."

    def test_text_without_body(self):
        assert parse_error_body("bitvavo GET https://api.bitvavo.com/v2/time 502 Bad Gateway") == (
            None,
            "bitvavo GET https://api.bitvavo.com/v2/time 502 Bad Gateway",
        )

    def test_json_without_error_code(self):
        text = 'bitvavo {"time": 1}'

        assert parse_error_body(text) == (None, text)

    def test_malformed_json(self):
        text = "bitvavo {not json}"

        assert parse_error_body(text) == (None, text)


class TestTranslateError:
    """Tests for mapping ccxt exceptions onto the Bitvavo taxonomy."""

    def test_exchange_error_with_body_becomes_api_error(self):
        error = translate_error(ccxt.BadSymbol(
            'bitvavo {"errorCode":205,"error":"market parameter is invalid."}'
        ))

        assert type(error) is BitvavoApiError
        assert error.code == 205
        assert error.message == "market parameter is invalid."
        assert str(error) == "bitvavo: 205: market parameter is invalid."

    def test_authentication_error(self):
        error = translate_error(ccxt.AuthenticationError(
            'bitvavo {"errorCode":305,"error":"No active API key found."}'
        ))

        assert isinstance(error, BitvavoAuthenticationError)
        assert isinstance(error, BitvavoApiError)
        assert error.code == 305

    def test_missing_credentials_reported_by_transport(self):
        error = translate_error(ccxt.AuthenticationError('bitvavo requires "apiKey" credential'))

        assert isinstance(error, BitvavoAuthenticationError)
        assert error.code is None

    def test_rate_limit_error(self):
        error = translate_error(ccxt.RateLimitExceeded(
            'bitvavo {"errorCode":105,"error":"Your account or IP address has exceeded the rate limit. '
            'Please retry after 1539180335424."}'
        ))

        assert isinstance(error, BitvavoRateLimitError)
        assert error.code == 105
        assert error.message.startswith("Your account or IP address has exceeded the rate limit.")

    def test_invalid_endpoint_is_plain_api_error(self):
        error = translate_error(ccxt.BadRequest(
            'bitvavo {"errorCode":110,"error":"Invalid endpoint. Please check url and HTTP method."}'
        ))

        assert type(error) is BitvavoApiError
        assert error.code == 110

    @pytest.mark.parametrize("exc", [
        ccxt.NetworkError("bitvavo GET https://api.bitvavo.com/v2/time"),
        ccxt.RequestTimeout("bitvavo GET https://api.bitvavo.com/v2/time request timed out (10000 ms)"),
        ccxt.ExchangeNotAvailable("bitvavo GET https://api.bitvavo.com/v2/time 503 Service Unavailable"),
    ])
    def test_network_failures_become_transport_errors(self, exc):
        error = translate_error(exc)

        assert isinstance(error, BitvavoTransportError)
        assert isinstance(error, BitvavoError)

    def test_exchange_error_without_body_is_transport_error(self):
        error = translate_error(ccxt.ExchangeError("bitvavo GET https://api.bitvavo.com/v2/time 500"))

        assert isinstance(error, BitvavoTransportError)
