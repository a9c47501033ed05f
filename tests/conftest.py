import hashlib
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class CountingSource:
    """Deterministic byte stream: SHA-256 of a seed and a running counter."""

    def __init__(self, seed: bytes = b"seed"):
        self.seed = seed
        self.counter = 0
        self.calls = 0

    def token_bytes(self, n: int) -> bytes:
        self.calls += 1
        out = b""
        while len(out) < n:
            out += hashlib.sha256(self.seed + self.counter.to_bytes(8, "big")).digest()
            self.counter += 1
        return out[:n]


class FixedSource:
    def __init__(self, block: bytes):
        self.block = block

    def token_bytes(self, n: int) -> bytes:
        return (self.block * (n // len(self.block) + 1))[:n]


@pytest.fixture
def secret32():
    return bytes(range(1, 17)) + bytes(16)


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv first so values a .env file loads later are undone at teardown
    for name in ("SSS_THRESHOLD", "SSS_TOTAL_SHARES", "SSS_CUSTODIANS", "SSS_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def fixed_source():
    return FixedSource
