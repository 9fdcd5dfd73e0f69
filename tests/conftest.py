"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import io
import wave
from collections.abc import Callable

import pytest

from chesswav.config import RenderSettings


@pytest.fixture
def short_settings() -> RenderSettings:
    """Short notes keep rendering tests fast."""
    return RenderSettings(note_ms=20, silence_ms=10)


@pytest.fixture
def read_wav() -> Callable[[bytes], wave.Wave_read]:
    """Open WAV bytes with the standard library decoder."""

    def _open(data: bytes) -> wave.Wave_read:
        return wave.open(io.BytesIO(data), "rb")

    return _open
