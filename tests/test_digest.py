import hashlib

from log_anon_lib.utils.encoder import encode
from log_anon_lib.utils.digest import hash_and_encode, random_salt, salted_digest

from vectors import TOKEN_192_168_10_25, TOKEN_MY_SECRET


def test_sha1_with_empty_salt_matches_reference_digest():
    digest = salted_digest(b"", b"192.168.10.25")
    assert digest == bytes.fromhex("1076f010e3d2a754a1ef534af436acecaeaee8de")
    assert encode(digest) == TOKEN_192_168_10_25


def test_hash_and_encode_reference_tokens():
    assert hash_and_encode(b"", b"192.168.10.25") == TOKEN_192_168_10_25
    assert hash_and_encode(b"", b"My secret") == TOKEN_MY_SECRET


def test_salt_is_hashed_before_data():
    assert salted_digest(b"salt", b"data") == hashlib.sha1(b"saltdata").digest()
    appended = encode(hashlib.sha1(b"data").digest() + b"salt")
    assert hash_and_encode(b"salt", b"data") != appended


def test_token_length_is_fixed():
    assert len(hash_and_encode(b"x", b"")) == 27
    assert len(hash_and_encode(b"x", b"a" * 10_000)) == 27


def test_salt_changes_digest():
    assert salted_digest(b"a", b"value") != salted_digest(b"b", b"value")


def test_random_salt():
    first, second = random_salt(), random_salt()
    assert len(first) == 20
    assert first != second
    assert len(random_salt(8)) == 8
