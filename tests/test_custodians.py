import base64

import pytest
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from custodians.keyring import CustodianKeyring, ShareUnwrapError
from sss.shamir import split_secret


@pytest.fixture
def share(secret32):
    return split_secret(secret32, 2, 3)[0]


def test_wrapped_layout_is_nonce_then_aesgcm(share):
    key = bytes(range(32))
    ring = CustodianKeyring(["a"], keys={"a": key})
    blob = base64.b64decode(ring.wrap_share("a", share, aad=b"ctx"))
    assert len(blob) == 12 + 33 + 16
    assert AESGCM(key).decrypt(blob[:12], blob[12:], b"ctx") == share.to_bytes()


def test_each_wrap_uses_a_fresh_nonce(share):
    ring = CustodianKeyring(["a"])
    first = base64.b64decode(ring.wrap_share("a", share, aad=b"ctx"))
    second = base64.b64decode(ring.wrap_share("a", share, aad=b"ctx"))
    assert first[:12] != second[:12]


@pytest.mark.parametrize("key", [b"", bytes(16), bytes(33)])
def test_supplied_key_must_be_32_bytes(key):
    with pytest.raises(ValueError, match="invalid key"):
        CustodianKeyring(["a"], keys={"a": key})


def test_wrap_unwrap(share):
    ring = CustodianKeyring(["a", "b"])
    wrapped = ring.wrap_share("a", share, aad=b"label:1")
    assert ring.unwrap_share("a", wrapped, aad=b"label:1") == share


def test_unwrap_with_wrong_aad(share):
    ring = CustodianKeyring(["a"])
    wrapped = ring.wrap_share("a", share, aad=b"label:1")
    with pytest.raises(ShareUnwrapError):
        ring.unwrap_share("a", wrapped, aad=b"label:2")


def test_unwrap_by_other_custodian(share):
    ring = CustodianKeyring(["a", "b"])
    wrapped = ring.wrap_share("a", share, aad=b"x")
    with pytest.raises(ShareUnwrapError):
        ring.unwrap_share("b", wrapped, aad=b"x")


def test_unwrap_tampered(share):
    ring = CustodianKeyring(["a"])
    blob = bytearray(base64.b64decode(ring.wrap_share("a", share, aad=b"x")))
    blob[-1] ^= 1
    with pytest.raises(ShareUnwrapError):
        ring.unwrap_share("a", base64.b64encode(bytes(blob)).decode(), aad=b"x")
    with pytest.raises(ShareUnwrapError):
        ring.unwrap_share("a", "%%%", aad=b"x")
    with pytest.raises(ShareUnwrapError):
        ring.unwrap_share("a", base64.b64encode(bytes(20)).decode(), aad=b"x")


def test_supplied_keys(share):
    keys = {"a": bytes(range(32))}
    wrapped = CustodianKeyring(["a"], keys=keys).wrap_share("a", share, aad=b"x")
    assert CustodianKeyring(["a"], keys=keys).unwrap_share("a", wrapped, aad=b"x") == share


def test_keyring_checks():
    with pytest.raises(ValueError):
        CustodianKeyring(["a", "a"])
    with pytest.raises(ValueError):
        CustodianKeyring(["a"], keys={"a": bytes(8)})
    ring = CustodianKeyring(["a"])
    assert "a" in ring
    assert "z" not in ring
    with pytest.raises(KeyError):
        ring.wrap_share("z", None, aad=b"x")
