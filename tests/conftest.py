from types import SimpleNamespace

import pytest

from tokensword import Signer, SignerOptions, new

TEST_SECRET = b"AVerySecretString"
FIXED_NOW = 1_700_000_000


@pytest.fixture
def signer() -> Signer:
    return new(TEST_SECRET)


@pytest.fixture
def fixed_clock(monkeypatch):
    """Freeze the clock seen by the signer and timestamp helpers at FIXED_NOW.

    Yields a mutable namespace; set ``clock.now`` to move time.
    """
    clock = SimpleNamespace(now=FIXED_NOW)
    fake_time = SimpleNamespace(time=lambda: clock.now + 0.25)
    monkeypatch.setattr("tokensword.signer.time", fake_time)
    monkeypatch.setattr("tokensword.timestamps.time", fake_time)
    yield clock


@pytest.fixture
def timestamp_signer(fixed_clock) -> Signer:
    return Signer(TEST_SECRET, SignerOptions(timestamp=True))


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Run with no TS_* variables set and an empty working directory (no .env files)."""
    import os

    for name in list(os.environ):
        if name.startswith("TS_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
