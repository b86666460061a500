import json

from utils import Failure, Success, get_endpoint


def test_success_serializes_payload_verbatim():
    payload = {"status": {"error_code": 0}, "data": [{"id": 1, "symbol": "BTC"}]}

    assert json.loads(Success(payload).to_text()) == payload
    assert Success(payload).ok is True


def test_failure_shape():
    failure = Failure("Missing CoinMarketCap API key", 403)

    assert json.loads(failure.to_text()) == {"error": "Missing CoinMarketCap API key", "status": 403}
    assert failure.ok is False


def test_failure_default_status():
    assert Failure("nope").status == 403


def test_get_endpoint_joins_base_and_path():
    assert get_endpoint("/v1/key/info") == "https://pro-api.coinmarketcap.com/v1/key/info"
    assert get_endpoint("v1/key/info", "https://example.test/") == "https://example.test/v1/key/info"
