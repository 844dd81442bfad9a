from __future__ import annotations

"""
HTTP Sink.

Forwards each rendered record to a remote collector with a JSON POST.
Stateless: no batching, no retries. Transport errors surface as
``requests.RequestException``, an ``OSError`` subclass, so the dispatcher
treats them like any other failed write.
"""

import requests
import urllib3

from logx.infra.network.common import CONTENT_TYPE, DEFAULT_TIMEOUT, USER_AGENT

# Every request below is sent with certificate verification disabled.
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)


class HttpWriter:
    """
    Posts rendered records to ``url``.

    Args:
        url: Collector endpoint.
        timeout: Request timeout in seconds.
    """

    def __init__(self, url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.url = url
        self.timeout = timeout

    def write(self, data: bytes) -> int:
        """
        Send one record, stripped of its trailing newline.

        Args:
            data: Rendered record bytes.

        Returns:
            int: Number of bytes consumed; 0 for empty input.

        Raises:
            requests.RequestException: On any transport failure.
        """
        if not data:
            return 0

        body = data[:-1] if data.endswith(b"\n") else data
        headers = {"Content-Type": CONTENT_TYPE, "User-Agent": USER_AGENT}
        # The response body is ignored; the context releases the connection.
        with requests.post(
            self.url,
            data=body,
            headers=headers,
            timeout=self.timeout,
            verify=False,
        ):
            pass
        return len(data)
