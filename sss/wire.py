import base64
import binascii

from pydantic import BaseModel, Field, field_validator, model_validator

from sss.field import FIELD_BYTES
from sss.models import MAX_SHARES, MIN_THRESHOLD, SecretShare


def _decode_b64(value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as e:
        raise ValueError("value must be valid base64") from e


class ShareModel(BaseModel):
    index: int = Field(ge=1, le=MAX_SHARES)
    value: str

    @field_validator("value")
    @classmethod
    def check_value(cls, v: str) -> str:
        if len(_decode_b64(v)) != FIELD_BYTES:
            raise ValueError(f"value must decode to exactly {FIELD_BYTES} bytes")
        return v

    @classmethod
    def from_share(cls, share: SecretShare) -> "ShareModel":
        return cls(index=share.index, value=base64.b64encode(share.value).decode("utf-8"))

    def to_share(self) -> SecretShare:
        return SecretShare(index=self.index, value=_decode_b64(self.value))


class ShareBundle(BaseModel):
    threshold: int = Field(ge=MIN_THRESHOLD, le=MAX_SHARES)
    shares: list[ShareModel]

    @model_validator(mode="after")
    def check_shares(self) -> "ShareBundle":
        indices = [s.index for s in self.shares]
        if len(set(indices)) != len(indices):
            raise ValueError("duplicate share index")
        if len(self.shares) < self.threshold:
            raise ValueError(f"bundle holds {len(self.shares)} shares, threshold is {self.threshold}")
        return self

    @classmethod
    def from_shares(cls, threshold: int, shares: list[SecretShare]) -> "ShareBundle":
        return cls(threshold=threshold, shares=[ShareModel.from_share(s) for s in shares])

    def to_shares(self) -> list[SecretShare]:
        return [s.to_share() for s in self.shares]

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: str | bytes) -> "ShareBundle":
        return cls.model_validate_json(data)


class RecoveredSecret(BaseModel):
    base64: str
    hex: str

    @classmethod
    def from_bytes(cls, secret: bytes) -> "RecoveredSecret":
        return cls(base64=base64.b64encode(secret).decode("utf-8"), hex=secret.hex())
