from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiohttp import ClientResponseError, RequestInfo
from multidict import CIMultiDict, CIMultiDictProxy
from yarl import URL


def make_response(payload=None, status: int = 200, json_error: Optional[Exception] = None) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.ok = status < 400
    if not response.ok:
        response.raise_for_status.side_effect = ClientResponseError(
            RequestInfo(url=URL('https://gas.station'), method='GET', headers=CIMultiDictProxy(CIMultiDict())),
            (),
            status=status,
            message='Internal Server Error',
        )
    response.json = AsyncMock(return_value=payload, side_effect=json_error)
    return response


def make_session(response: Optional[MagicMock] = None, error: Optional[Exception] = None) -> MagicMock:
    session = MagicMock()
    if error is not None:
        session.get.side_effect = error
        return session
    request_context = session.get.return_value
    request_context.__aenter__ = AsyncMock(return_value=response)
    request_context.__aexit__ = AsyncMock(return_value=False)
    return session


@pytest.fixture()
def mock_session():
    """Returns a factory of aiohttp.ClientSession mocks answering every GET with the given body."""

    def factory(payload=None, status: int = 200, json_error=None, error=None) -> MagicMock:
        return make_session(make_response(payload, status, json_error), error)

    return factory
