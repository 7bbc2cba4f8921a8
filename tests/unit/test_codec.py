import uuid

import pytest

from persistence_lib.storage.codec import INVALID_CHARS, KeyCodec, decode_key, encode_key


def test_encode_replaces_every_invalid_character():
    assert encode_key('<>:"/\\|?*') == "_" * len(INVALID_CHARS)
    assert encode_key("reports/2024:q1") == "reports_2024_q1"


def test_encode_leaves_safe_keys_alone():
    assert encode_key("settings.main-v2") == "settings.main-v2"
    assert encode_key(42) == "42"
    u = uuid.uuid4()
    assert encode_key(u) == str(u)


def test_encode_is_lossy_for_distinct_invalid_characters():
    assert encode_key("a/b") == encode_key("a:b") == "a_b"


def test_encode_rejects_none():
    with pytest.raises(ValueError):
        encode_key(None)


def test_decode_special_cases():
    u = uuid.uuid4()
    assert decode_key("name", str) == "name"
    assert decode_key("17", int) == 17
    assert decode_key(str(u), uuid.UUID) == u
    assert decode_key("1.5", float) == 1.5


def test_decode_failures_return_none():
    assert decode_key("abc", int) is None
    assert decode_key("not-a-uuid", uuid.UUID) is None
    assert decode_key("abc", float) is None


def test_key_round_trip_for_unambiguous_keys():
    for key_type, keys in (
        (str, ["alpha", "user_1", "a b c"]),
        (int, [0, 7, -3, 123456789]),
        (uuid.UUID, [uuid.uuid4() for _ in range(5)]),
    ):
        codec = KeyCodec(key_type)
        for k in keys:
            assert codec.decode(codec.encode(k)) == k


def test_bool_keys_round_trip():
    codec = KeyCodec(bool)
    assert codec.decode(codec.encode(False)) is False
    assert codec.decode(codec.encode(True)) is True
    assert codec.decode("false") is None
    assert codec.decode("1") is None
