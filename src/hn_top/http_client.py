# hn_top/http_client.py
from __future__ import annotations
import sys, uuid
from typing import Optional
import httpx

from .errors import TransportError

USER_AGENT = "hn-top/0.1 (+https://news.ycombinator.com)"


class HttpClient:
    """
    - Reusable async HTTP client with:
      - base_url
      - httpx timeouts (unset = wait forever)
      - single attempt per request; the caller owns reconnect policy
      - every failure surfaces as TransportError
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
        *,
        verbose: bool = False,
        default_headers: Optional[dict[str, str]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=read_timeout,
        )
        self.verbose = verbose
        self.default_headers = {"User-Agent": USER_AGENT, **(default_headers or {})}
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.default_headers,
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._client is not None:
            await self._client.aclose()

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Issue one request and return the 2xx response.
        Network errors and non-2xx statuses are raised as TransportError.
        Each request tagged with X-Request-Id for traceability.
        """
        assert self._client is not None
        req_id = kwargs.pop("req_id", str(uuid.uuid4()))
        headers = kwargs.pop("headers", {})
        headers.setdefault("X-Request-Id", req_id)
        kwargs["headers"] = headers

        url = self.base_url + path # for logs

        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            self._log(f"[req#{req_id}] [giving up] {method} {url} params={kwargs.get('params')} failed: network: {e!r}")
            raise TransportError(f"{method} {url}: {e!r}", req_id=req_id) from e

        status = resp.status_code
        if not (200 <= status < 300):
            self._log(f"[req#{req_id}] [giving up] {method} {url} returned {status}")
            raise TransportError(f"{method} {url} returned {status}", req_id=req_id, status=status)
        return resp

    async def get_text(self, path: str, **params) -> str:
        resp = await self.request("GET", path, params=params or None)
        return resp.text

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message, file=sys.stderr)
