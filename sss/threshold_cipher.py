"""Repeating 32-byte XOR key with no tag: not for secrets longer than the key."""
import logging
from collections.abc import Sequence

from sss.entropy import RandomSource, resolve
from sss.field import FIELD_BYTES
from sss.models import SecretShare, ThresholdConfig, ThresholdEncryption
from sss.shamir import combine_shares, split_secret

logger = logging.getLogger(__name__)


def _xor_with_key(data: bytes, key: bytes) -> bytes:
    return bytes(b ^ key[i % FIELD_BYTES] for i, b in enumerate(data))


def create_threshold_encryption(
    secret: bytes,
    threshold: int,
    total_shares: int,
    random_source: RandomSource | None = None,
) -> ThresholdEncryption:
    ThresholdConfig(threshold=threshold, total_shares=total_shares).validate()
    source = resolve(random_source)
    key = source.token_bytes(FIELD_BYTES)
    encrypted = _xor_with_key(secret, key)
    key_shares = split_secret(key, threshold, total_shares, random_source=source)
    logger.debug("threshold-encrypted %d bytes (%d-of-%d)", len(secret), threshold, total_shares)
    return ThresholdEncryption(encrypted_secret=encrypted, key_shares=key_shares)


def decrypt_with_threshold(encrypted_secret: bytes, key_shares: Sequence[SecretShare]) -> bytes:
    key = combine_shares(key_shares)
    return _xor_with_key(encrypted_secret, key)
