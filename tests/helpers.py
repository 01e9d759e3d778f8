# tests/helpers.py

"""Builders for fake HTTP sessions and clients."""

import json
from typing import Any
from unittest.mock import MagicMock

from coinprice.clients.coingecko_client import CoinGeckoClient

STUB_BASE_URL = "https://stub.invalid/api/v3"


def make_response(body: Any, status_code: int = 200) -> MagicMock:
    """A response mock whose ``text`` is ``body`` encoded as JSON."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = body if isinstance(body, str) else json.dumps(body)
    return resp


def routed_session(routes: dict[str, Any]) -> MagicMock:
    """A session mock answering each endpoint path from ``routes``.

    Values may be a response mock, an exception instance to raise,
    or any JSON-serialisable body.
    """
    session = MagicMock()

    def fake_get(url: str, **_: Any) -> MagicMock:
        path = url[len(STUB_BASE_URL):]
        answer = routes[path]
        if isinstance(answer, BaseException):
            raise answer
        if isinstance(answer, MagicMock):
            return answer
        return make_response(answer)

    session.get.side_effect = fake_get
    return session


def stub_client(routes: dict[str, Any]) -> CoinGeckoClient:
    """A client pointed at the stub base URL with a routed session."""
    return CoinGeckoClient(
        base_url=STUB_BASE_URL,
        api_key="",
        session=routed_session(routes),
    )
