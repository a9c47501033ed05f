import base64
import binascii
import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from sss.models import SecretShare

logger = logging.getLogger(__name__)

KEY_BYTES = 32
NONCE_BYTES = 12
TAG_BYTES = 16


class ShareUnwrapError(ValueError):
    pass


class CustodianKeyring:
    def __init__(self, custodian_ids: list[str], keys: dict[str, bytes] | None = None):
        if len(set(custodian_ids)) != len(custodian_ids):
            raise ValueError("duplicate custodian id")
        self.custodian_ids = list(custodian_ids)
        self._keys: dict[str, bytes] = {}
        for cid in self.custodian_ids:
            key = (keys or {}).get(cid)
            if key is None:
                key = os.urandom(KEY_BYTES)
            if len(key) != KEY_BYTES:
                raise ValueError(f"invalid key for custodian {cid}")
            self._keys[cid] = key

    def __contains__(self, custodian_id: str) -> bool:
        return custodian_id in self._keys

    def _key(self, custodian_id: str) -> bytes:
        try:
            return self._keys[custodian_id]
        except KeyError:
            raise KeyError(f"unknown custodian {custodian_id!r}") from None

    def wrap_share(self, custodian_id: str, share: SecretShare, aad: bytes) -> str:
        key = self._key(custodian_id)
        nonce = os.urandom(NONCE_BYTES)
        ct = AESGCM(key).encrypt(nonce, share.to_bytes(), aad)
        return base64.b64encode(nonce + ct).decode("utf-8")

    def unwrap_share(self, custodian_id: str, wrapped_b64: str, aad: bytes) -> SecretShare:
        key = self._key(custodian_id)
        try:
            blob = base64.b64decode(wrapped_b64, validate=True)
        except binascii.Error as e:
            raise ShareUnwrapError("wrapped share is not valid base64") from e
        if len(blob) <= NONCE_BYTES + TAG_BYTES:
            raise ShareUnwrapError("wrapped share is truncated")
        nonce = blob[:NONCE_BYTES]
        ct = blob[NONCE_BYTES:]
        try:
            raw = AESGCM(key).decrypt(nonce, ct, aad)
        except InvalidTag as e:
            logger.warning("share for custodian %s failed authentication", custodian_id)
            raise ShareUnwrapError(f"cannot unwrap share for custodian {custodian_id}") from e
        return SecretShare.from_bytes(raw)
