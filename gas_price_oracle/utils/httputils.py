from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from aiohttp import ClientSession


@asynccontextmanager
async def client_session(session: Optional[ClientSession] = None) -> AsyncIterator[ClientSession]:
    """Yield the caller's aiohttp.ClientSession, or a short-lived one.

    aiohttp recommends that only one ClientSession exist for the lifetime of an application,
    so callers doing many requests should pass their own session. Without one, a session
    is opened for the single request and closed right after.
    See: https://docs.aiohttp.org/en/stable/client_quickstart.html#make-a-request

    """
    if session is not None:
        yield session
        return

    async with ClientSession() as own_session:
        yield own_session
