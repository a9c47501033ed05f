from dataclasses import dataclass


def seal_aad(label: str, version: int) -> bytes:
    return f"{label}:{version}".encode("utf-8")


@dataclass(frozen=True)
class SealedSecret:
    label: str
    version: int
    threshold: int
    total_shares: int
    encrypted_secret: bytes
    wrapped_shares: dict[str, str]
    created_at: float

    @property
    def aad(self) -> bytes:
        return seal_aad(self.label, self.version)
