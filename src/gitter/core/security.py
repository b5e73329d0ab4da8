"""Password hashing built on Argon2id primitives."""
from __future__ import annotations

import hmac

from argon2.low_level import Type, hash_secret_raw

from gitter.core.settings import Settings, settings as default_settings

SALT_LENGTH_BYTES = 8


def salt_from_id(user_id: int) -> bytes:
    """Return the 8-byte little-endian salt derived from a user id."""
    return (user_id & 0xFFFFFFFFFFFFFFFF).to_bytes(SALT_LENGTH_BYTES, "little")


def hash_password(password: str, user_id: int, settings: Settings | None = None) -> bytes:
    """Derive the stored credential for ``password`` salted by ``user_id``.

    Args:
        password: Plaintext password supplied by the client.
        user_id: Numeric user identifier used as the salt source.
        settings: Settings carrying the Argon2 cost parameters.

    Returns:
        Raw Argon2id digest of ``settings.argon2_hash_length`` bytes.
    """
    cfg = settings or default_settings
    return hash_secret_raw(
        secret=password.encode("utf-8"),
        salt=salt_from_id(user_id),
        time_cost=cfg.argon2_time_cost,
        memory_cost=cfg.argon2_memory_cost_kib,
        parallelism=cfg.argon2_parallelism,
        hash_len=cfg.argon2_hash_length,
        type=Type.ID,
    )


def verify_password(
    password: str,
    user_id: int,
    hashed_password: bytes,
    settings: Settings | None = None,
) -> bool:
    """Return True if ``password`` hashes to ``hashed_password`` for ``user_id``."""
    candidate = hash_password(password, user_id, settings)
    return hmac.compare_digest(candidate, bytes(hashed_password))
