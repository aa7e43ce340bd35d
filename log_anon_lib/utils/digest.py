"""
Salted digest helpers.

The salt is always fed to the hash *before* the data.  Appending the salt to
the raw digest (``encode(sha1(data) + salt)``) would give a different and
incompatible token space, so it is never done here.
"""

import hashlib
import secrets

from log_anon_lib.constants import SALT_LENGTH
from log_anon_lib.utils.encoder import encode

DIGEST_NAME = "sha1"


def random_salt(length: int = SALT_LENGTH) -> bytes:
    """Return ``length`` bytes from the operating system CSPRNG."""
    return secrets.token_bytes(length)


def salted_digest(salt: bytes, data: bytes) -> bytes:
    hasher = hashlib.new(DIGEST_NAME)
    hasher.update(salt)
    hasher.update(data)
    return hasher.digest()


def hash_and_encode(salt: bytes, data: bytes) -> str:
    """Digest ``data`` under ``salt`` and return the printable token."""
    return encode(salted_digest(salt, data))
