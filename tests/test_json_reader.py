import json

import pytest

from arkio.json_reader import JsonDocument, make_json_string

DOCUMENT = json.dumps(
    {
        "success": "yes",
        "fee": 2500000000,
        "account": {"address": "DHQ4Fjsyiop3qBR4otAjAu6cBHkgRELqGA", "secondSignature": 1},
        "peers": ["167.114.29.55", 4002],
        "delegates": [{"username": "sleepdeficit", "rate": 31}],
    }
)


@pytest.fixture
def document():
    return make_json_string(DOCUMENT)


def test_value_for_string(document):
    assert document.value_for("success") == "yes"


def test_value_for_number_is_text(document):
    assert document.value_for("fee") == "2500000000"


def test_value_for_object_round_trips(document):
    assert json.loads(document.value_for("account")) == json.loads(DOCUMENT)["account"]


def test_value_for_object_is_compact(document):
    assert " " not in document.value_for("delegates")


def test_value_in(document):
    assert document.value_in("account", "address") == "DHQ4Fjsyiop3qBR4otAjAu6cBHkgRELqGA"
    assert document.value_in("account", "secondSignature") == "1"


def test_subvalue_for(document):
    assert document.subvalue_for("peers", 0) == "167.114.29.55"
    assert document.subvalue_for("peers", 1) == "4002"


def test_subarray_value_in(document):
    assert document.subarray_value_in("delegates", 0, "username") == "sleepdeficit"
    assert document.subarray_value_in("delegates", 0, "rate") == "31"


def test_missing_values_read_as_null(document):
    assert document.value_for("absent") == "null"
    assert document.subvalue_for("peers", 5) == "null"
    assert document.subarray_value_in("absent", 0, "username") == "null"


def test_index_on_object_raises(document):
    with pytest.raises(TypeError):
        document.subvalue_for("account", 0)


def test_key_on_array_raises(document):
    with pytest.raises(TypeError):
        document.value_in("peers", "address")


def test_negative_index_raises(document):
    with pytest.raises(IndexError):
        document.subvalue_for("peers", -1)


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        JsonDocument("{not json")