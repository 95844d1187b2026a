# vectordb_sdk/core/config.py
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration.

Everything the default transport needs is passed explicitly; nothing is read
from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from vectordb_sdk.core.errors import BadRequest

API_KEY_HEADER = "api-key"
DEFAULT_TIMEOUT_S = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for `HttpxTransport`.

    Attributes:
        base_url: Service root, e.g. "http://localhost:6333"
        api_key: Optional key, sent as the `api-key` header
        timeout_s: Per-request timeout in seconds (None disables it)
        headers: Extra headers attached to every request
    """
    base_url: str
    api_key: Optional[str] = None
    timeout_s: Optional[float] = DEFAULT_TIMEOUT_S
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise BadRequest("base_url must be a non-empty string")
        if not self.base_url.startswith(("http://", "https://")):
            raise BadRequest(
                "base_url must start with http:// or https://",
                details={"base_url": self.base_url},
            )
        if self.timeout_s is not None and self.timeout_s < 0:
            raise BadRequest("timeout_s must be >= 0", details={"timeout_s": self.timeout_s})
        if self.api_key is not None and not self.api_key:
            raise BadRequest("api_key must be non-empty when provided")
        # Normalized once so paths can be appended verbatim.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def default_headers(self) -> Dict[str, str]:
        out = {"Accept": "application/json"}
        out.update(self.headers)
        if self.api_key:
            out[API_KEY_HEADER] = self.api_key
        return out


__all__ = ["ClientConfig", "API_KEY_HEADER", "DEFAULT_TIMEOUT_S"]
