# secp256k1 field prime, used here only as a 256-bit modulus
PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F

FIELD_BYTES = 32


def add(a: int, b: int) -> int:
    return (a + b) % PRIME


def mul(a: int, b: int) -> int:
    return (a * b) % PRIME


def power(base: int, exp: int) -> int:
    return pow(base, exp, PRIME)


def mod_inverse(a: int, m: int = PRIME) -> int:
    """Inverse of ``a`` modulo ``m`` via the extended Euclidean algorithm."""
    if a % m == 0:
        raise ValueError("zero has no modular inverse")
    old_r, r = a, m
    old_s, s = 1, 0
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
    if old_r != 1:
        raise ValueError("value is not invertible modulo m")
    return old_s % m


def to_bytes(value: int) -> bytes:
    return value.to_bytes(FIELD_BYTES, byteorder="big")


def from_bytes(data: bytes) -> int:
    return int.from_bytes(data, byteorder="big")
