from __future__ import annotations

import logging
import socket
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, field

from .errors import ProbeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    url: str
    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


def build_url(base_url: str, path: str, *, auth_token: str | None = None) -> str:
    """Join an endpoint path onto the node base URL and attach the auth query parameter."""

    base = base_url if base_url.endswith("/") else base_url + "/"
    url = urllib.parse.urljoin(base, path.lstrip("/"))
    if auth_token:
        separator = "&" if urllib.parse.urlsplit(url).query else "?"
        url = f"{url}{separator}auth={urllib.parse.quote(auth_token, safe='')}"
    return url


class HttpClient:
    def __init__(
        self,
        *,
        base_url: str,
        auth_token: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._base_url = base_url
        self._auth_token = auth_token
        self._timeout = timeout

    def url_for(self, path: str) -> str:
        return build_url(self._base_url, path, auth_token=self._auth_token)

    def get(self, path: str) -> HttpResponse:
        url = self.url_for(path)
        request = urllib.request.Request(url=url, method="GET")
        logger.debug("GET %s", url)

        try:
            with urllib.request.urlopen(request, timeout=self._timeout) as response:
                status = response.getcode()
                headers = dict(response.headers.items())
                raw = response.read()
        except urllib.error.HTTPError as exc:
            status = exc.code
            headers = dict(exc.headers.items()) if exc.headers is not None else {}
            raw = exc.read()
        except urllib.error.URLError as exc:
            raise ProbeError("transport", str(exc.reason), url=url) from exc
        except (socket.timeout, TimeoutError) as exc:
            raise ProbeError("transport", f"timed out after {self._timeout}s", url=url) from exc
        except OSError as exc:
            raise ProbeError("transport", str(exc), url=url) from exc

        return HttpResponse(url=url, status_code=status, content=raw, headers=headers)
