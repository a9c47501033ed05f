from sss.entropy import RandomSource, resolve
from sss.field import FIELD_BYTES, PRIME, add, from_bytes, mul


def generate_coefficients(secret: int, degree: int, random_source: RandomSource | None = None) -> list[int]:
    """Return ``[secret, a1, ..., a_degree]`` with fresh random ``a_i`` mod PRIME."""
    source = resolve(random_source)
    coeffs = [secret % PRIME]
    for _ in range(degree):
        coeffs.append(from_bytes(source.token_bytes(FIELD_BYTES)) % PRIME)
    return coeffs


def evaluate_polynomial(coeffs: list[int], x: int) -> int:
    y = 0
    x_power = 1
    for c in coeffs:
        y = add(y, mul(c, x_power))
        x_power = mul(x_power, x)
    return y
