from dataclasses import dataclass

from sss.errors import InsufficientShares, InvalidShare, ThresholdTooLow, TooManyShares
from sss.field import FIELD_BYTES

MIN_THRESHOLD = 2
MAX_SHARES = 255


@dataclass(frozen=True)
class SecretShare:
    """Only meaningful next to shares from the same split."""

    index: int
    value: bytes

    def __post_init__(self) -> None:
        if not (1 <= self.index <= MAX_SHARES):
            raise InvalidShare(f"share index must be in [1, {MAX_SHARES}], got {self.index}")
        if len(self.value) != FIELD_BYTES:
            raise InvalidShare(f"share value must be {FIELD_BYTES} bytes, got {len(self.value)}")

    def to_bytes(self) -> bytes:
        return bytes([self.index]) + self.value

    @classmethod
    def from_bytes(cls, data: bytes) -> "SecretShare":
        if len(data) != FIELD_BYTES + 1:
            raise InvalidShare("invalid share length")
        return cls(index=data[0], value=bytes(data[1:]))


@dataclass(frozen=True)
class ThresholdConfig:
    threshold: int
    total_shares: int

    def validate(self) -> "ThresholdConfig":
        if self.threshold < MIN_THRESHOLD:
            raise ThresholdTooLow(f"threshold must be at least {MIN_THRESHOLD}")
        if self.total_shares < self.threshold:
            raise InsufficientShares("total shares must be >= threshold")
        if self.total_shares > MAX_SHARES:
            raise TooManyShares(f"maximum {MAX_SHARES} shares supported")
        return self


@dataclass(frozen=True)
class ThresholdEncryption:
    encrypted_secret: bytes
    key_shares: list[SecretShare]
