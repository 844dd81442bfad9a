from __future__ import annotations

USER_AGENT = "logx-HttpWriter/0.1.0"
DEFAULT_TIMEOUT = 5
CONTENT_TYPE = "application/json;charset=utf-8"
