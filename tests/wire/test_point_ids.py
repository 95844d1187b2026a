# SPDX-License-Identifier: Apache-2.0
"""
Wire model: ExtendedPointId.

Asserts:
  • unsigned integers decode as int, strings as str (no coercion either way)
  • negatives, booleans, floats and null fail with reason InvalidPointId
  • struct construction rejects ids the service cannot store
  • encoding keeps the chosen variant ("42" stays a string)
"""

import pytest

from vectordb_sdk import (
    BadRequest,
    DecodeError,
    HasIdCondition,
    PointStruct,
    decode_point_id,
    decode_point_ids,
    dumps,
)


def test_point_id_integer_decodes_as_int():
    value = decode_point_id(42)
    assert value == 42
    assert type(value) is int


def test_point_id_numeric_string_stays_string():
    value = decode_point_id("42")
    assert value == "42"
    assert isinstance(value, str)


def test_point_id_uuid_string():
    uuid = "6b1f7c1e-0f7a-4c57-9a1b-1c5e3a3e2f10"
    assert decode_point_id(uuid) == uuid


def test_point_id_accepts_full_uint64_range():
    assert decode_point_id(2**64 - 1) == 2**64 - 1


@pytest.mark.parametrize("raw", [-1, True, False, 1.5, 1.0, None, [], {}])
def test_point_id_rejects_non_ids(raw):
    with pytest.raises(DecodeError) as exc_info:
        decode_point_id(raw, "$.result.id")

    err = exc_info.value
    assert err.reason == "InvalidPointId"
    assert err.target == "ExtendedPointId"
    assert err.candidates == ("uint", "str")
    assert err.path == "$.result.id"
    assert len(err.details["failures"]) == 2


def test_point_id_list_reports_index_of_bad_element():
    with pytest.raises(DecodeError) as exc_info:
        decode_point_ids([1, "a", -2])
    assert exc_info.value.path == "$[2]"


def test_point_id_encoding_keeps_variant():
    assert dumps(PointStruct(id=42, vector=[0.5])) == b'{"id":42,"vector":[0.5]}'
    assert dumps(PointStruct(id="42", vector=[0.5])) == b'{"id":"42","vector":[0.5]}'


@pytest.mark.parametrize("bad", [-1, True, 1.5, b"raw"])
def test_point_struct_rejects_invalid_id_at_construction(bad):
    with pytest.raises(BadRequest):
        PointStruct(id=bad, vector=[0.5])


def test_has_id_condition_checks_every_id():
    with pytest.raises(BadRequest) as exc_info:
        HasIdCondition(has_id=[1, 2, -3])
    assert exc_info.value.details["field"] == "has_id[2]"
