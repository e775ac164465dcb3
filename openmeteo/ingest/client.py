"""Open-Meteo HTTP client: one GET per call, bounded timeout, no retries."""

import json
import logging
import re
import tempfile
from collections.abc import Mapping
from pathlib import Path
from urllib.parse import urlencode

import httpx

from openmeteo.errors import NetworkError, UpstreamError
from openmeteo.models.response import ApiResponse, decode_response

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "openmeteo-cli/1.1.0"
CUSTOMER_PREFIX = "customer-"
_APIKEY_RE = re.compile(r"(apikey=)[^&]+")


def mask_api_key(url: str) -> str:
    return _APIKEY_RE.sub(r"\1***", url)


def _reason(body: str) -> str:
    """Prefer the API's own ``reason`` field, else echo the body."""
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict) and data.get("reason"):
        return str(data["reason"])
    return body.strip() or "empty response"


class OpenMeteoClient:
    def __init__(
        self,
        api_key: str | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        temp_dir: str | Path | None = None,
    ):
        self.api_key = api_key
        self.user_agent = user_agent
        self.timeout = timeout
        self.temp_dir = temp_dir

    def build_url(self, base_url: str, params: Mapping[str, str | None]) -> str:
        """Assemble the request URL, dropping empty parameters.

        With an API key the host gains the commercial ``customer-`` prefix and
        the key is sent as ``apikey``.
        """
        query = {k: v for k, v in params.items() if v is not None and v != ""}
        if self.api_key:
            scheme, _, rest = base_url.partition("://")
            if not rest.startswith(CUSTOMER_PREFIX):
                base_url = f"{scheme}://{CUSTOMER_PREFIX}{rest}"
            query["apikey"] = self.api_key
        if not query:
            return base_url
        return f"{base_url}?{urlencode(query, safe=',/:')}"

    def fetch(self, url: str) -> str:
        """GET ``url`` and return the body text.

        The body is spooled through a temporary file that is removed on every
        path. Raises NetworkError on transport failure and UpstreamError for
        HTTP status >= 400.
        """
        base_url = url.split("?", 1)[0]
        logger.debug("GET %s", mask_api_key(url))
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        with tempfile.NamedTemporaryFile(
            prefix="openmeteo-", suffix=".json", dir=self.temp_dir
        ) as spool:
            try:
                with httpx.stream("GET", url, headers=headers, timeout=self.timeout) as resp:
                    for chunk in resp.iter_bytes():
                        spool.write(chunk)
                    status = resp.status_code
            except httpx.RequestError as e:
                logger.debug("request failed: %s", e)
                raise NetworkError(f"network error: could not reach {base_url}") from e
            spool.seek(0)
            body = spool.read().decode("utf-8", errors="replace")

        logger.debug("HTTP %d, %d bytes", status, len(body))
        if status >= 400:
            raise UpstreamError(status, _reason(body))
        return body

    def get(self, base_url: str, params: Mapping[str, str | None]) -> ApiResponse:
        return decode_response(self.fetch(self.build_url(base_url, params)))
