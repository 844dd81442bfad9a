from __future__ import annotations

"""
Network Sinks.

Remote delivery adapters implementing the byte writer contract.
"""

from logx.infra.network.common import CONTENT_TYPE, DEFAULT_TIMEOUT
from logx.infra.network.http_writer import HttpWriter

__all__ = [
    "HttpWriter",
    "CONTENT_TYPE",
    "DEFAULT_TIMEOUT",
]
