"""combine_shares does not know the split threshold: fewer than M shares
return a wrong 32-byte value, not an error.
"""
import logging
from collections.abc import Sequence

from sss.entropy import RandomSource
from sss.errors import DuplicateShareIndex, InsufficientShares, InvalidSecretLength
from sss.field import FIELD_BYTES, PRIME, from_bytes, mod_inverse, mul, to_bytes
from sss.models import SecretShare, ThresholdConfig
from sss.polynomial import evaluate_polynomial, generate_coefficients

logger = logging.getLogger(__name__)


def split_secret(
    secret: bytes,
    threshold: int,
    total_shares: int,
    random_source: RandomSource | None = None,
) -> list[SecretShare]:
    if len(secret) != FIELD_BYTES:
        raise InvalidSecretLength(f"secret must be {FIELD_BYTES} bytes")
    ThresholdConfig(threshold=threshold, total_shares=total_shares).validate()

    coeffs = generate_coefficients(from_bytes(secret), threshold - 1, random_source)
    shares = [
        SecretShare(index=x, value=to_bytes(evaluate_polynomial(coeffs, x)))
        for x in range(1, total_shares + 1)
    ]
    del coeffs  # the polynomial must not outlive the split

    logger.debug("split secret into %d shares, threshold %d", total_shares, threshold)
    return shares


def _lagrange_at_zero(points: list[tuple[int, int]]) -> int:
    secret = 0
    for i, (x_i, y_i) in enumerate(points):
        num = 1
        den = 1
        for j, (x_j, _) in enumerate(points):
            if i == j:
                continue
            num = mul(num, -x_j % PRIME)
            den = mul(den, (x_i - x_j) % PRIME)
        secret = (secret + y_i * mul(num, mod_inverse(den))) % PRIME
    return secret


def combine_shares(shares: Sequence[SecretShare]) -> bytes:
    if len(shares) < 2:
        raise InsufficientShares("at least 2 shares required")

    points = [(s.index, from_bytes(s.value)) for s in shares]
    xs = [x for x, _ in points]
    if len(set(xs)) != len(xs):
        raise DuplicateShareIndex("duplicate share index")

    logger.debug("combining shares %s", xs)
    return to_bytes(_lagrange_at_zero(points))


def verify_shares(shares: Sequence[SecretShare], expected_threshold: int) -> bool:
    """Heuristic: only shares[:t + 1] are compared, and exactly t shares pass unchecked."""
    if len(shares) < expected_threshold:
        return False

    try:
        first = combine_shares(shares[:expected_threshold])
        if len(shares) > expected_threshold:
            second = combine_shares(shares[1 : expected_threshold + 1])
            return first == second
        return True
    except Exception:
        logger.debug("share verification failed", exc_info=True)
        return False
