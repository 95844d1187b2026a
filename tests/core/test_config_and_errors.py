# SPDX-License-Identifier: Apache-2.0
"""
Client configuration and the error taxonomy.
"""

import dataclasses
import json

import pytest

from vectordb_sdk import (
    API_KEY_HEADER,
    BadRequest,
    ClientConfig,
    DecodeError,
    EncodeError,
    RemoteError,
    TransportError,
    VectorDBError,
)


# --------------------------------------------------------------------------- #
# ClientConfig
# --------------------------------------------------------------------------- #


def test_config_strips_trailing_slash():
    assert ClientConfig(base_url="https://db.example.com:6333///").base_url == "https://db.example.com:6333"


@pytest.mark.parametrize("base_url", ["", "   ", "localhost:6333", "ftp://db", None])
def test_config_rejects_bad_base_url(base_url):
    with pytest.raises(BadRequest):
        ClientConfig(base_url=base_url)


def test_config_rejects_negative_timeout():
    with pytest.raises(BadRequest):
        ClientConfig(base_url="http://db", timeout_s=-1)


def test_config_allows_disabled_timeout():
    assert ClientConfig(base_url="http://db", timeout_s=None).timeout_s is None


def test_config_rejects_empty_api_key():
    with pytest.raises(BadRequest):
        ClientConfig(base_url="http://db", api_key="")


def test_default_headers():
    config = ClientConfig(base_url="http://db", api_key="k", headers={"X-Team": "search"})
    assert config.default_headers() == {
        "Accept": "application/json",
        "X-Team": "search",
        API_KEY_HEADER: "k",
    }
    assert "api-key" not in ClientConfig(base_url="http://db").default_headers()


def test_config_is_frozen():
    config = ClientConfig(base_url="http://db")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.base_url = "http://other"  # type: ignore[misc]


# --------------------------------------------------------------------------- #
# Errors
# --------------------------------------------------------------------------- #


@pytest.mark.parametrize(
    "err, code",
    [
        (BadRequest("bad"), "BAD_REQUEST"),
        (EncodeError("enc"), "ENCODE_ERROR"),
        (DecodeError("dec", target="Filter"), "DECODE_ERROR"),
        (RemoteError("remote"), "REMOTE_ERROR"),
        (TransportError("net"), "TRANSPORT_ERROR"),
    ],
)
def test_error_codes_and_hierarchy(err, code):
    assert isinstance(err, VectorDBError)
    assert err.code == code


def test_code_can_be_overridden():
    assert TransportError("slow", code="TIMEOUT").code == "TIMEOUT"


def test_asdict_is_json_serializable_and_sorted():
    err = RemoteError("not found", status_code=404, details={"zeta": 1, "alpha": 2})
    data = err.asdict()
    assert data["error"] == "RemoteError"
    assert list(data["details"]) == ["alpha", "status_code", "zeta"]
    json.dumps(data)


def test_decode_error_details():
    err = DecodeError(
        "no variant",
        target="Condition",
        path="$.must[0]",
        reason="InvalidCondition",
        candidates=["FieldCondition", "Filter"],
        raw={"x": 1},
    )
    assert err.details == {
        "target": "Condition",
        "path": "$.must[0]",
        "reason": "InvalidCondition",
        "candidates": ["FieldCondition", "Filter"],
    }
    assert err.candidates == ("FieldCondition", "Filter")
    assert err.asdict()["raw"] == "{'x': 1}"


def test_decode_error_raw_preview_is_truncated():
    err = DecodeError("too long", target="Payload", raw="x" * 1000)
    assert len(err.asdict()["raw"]) == 200
    assert err.asdict()["raw"].endswith("...")
