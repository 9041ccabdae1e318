import httpx
from typing import AsyncIterator


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """One client per request, closed once the response is sent"""
    async with httpx.AsyncClient() as client:
        yield client
