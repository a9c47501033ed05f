import secrets
from typing import Protocol


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


DEFAULT_SOURCE = SystemRandomSource()


def resolve(source: RandomSource | None) -> RandomSource:
    return DEFAULT_SOURCE if source is None else source
