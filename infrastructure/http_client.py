"""Async HTTP transport for the siteverify POST."""

from typing import Any, Optional

import httpx

USER_AGENT = "hcaptcha-verify/1.0"


class HttpClient:
    """Thin async wrapper around httpx.AsyncClient.

    Only posts form bodies; status handling and decoding are left to the
    caller. A custom ``transport`` swaps the network layer out in tests.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"User-Agent": USER_AGENT},
        )

    async def post_form(self, url: str, form: dict[str, str]) -> httpx.Response:
        return await self._client.post(url, data=form)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
