"""Plain HTTP GET requests."""

from __future__ import annotations

import urllib.error
import urllib.request


class FetchError(OSError):
    """Raised when a page cannot be fetched or does not answer 200 OK."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def http_get(url: str) -> str:
    """Fetch a URL and return its body as text; anything but 200 is an error."""
    try:
        with urllib.request.urlopen(url) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        exc.close()
        raise FetchError(
            f"failed to fetch URL: {url}, status code: {exc.code}", exc.code
        ) from None
    except urllib.error.URLError as exc:
        raise FetchError(f"failed to fetch URL: {url}: {exc.reason}") from exc

    if status != 200:
        raise FetchError(f"failed to fetch URL: {url}, status code: {status}", status)
    return body.decode("utf-8", errors="replace")