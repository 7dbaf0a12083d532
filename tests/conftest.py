"""Make the top-level modules importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from customrng import CustomRNG  # noqa: E402


@pytest.fixture
def seeded_rng():
    return CustomRNG(seed=1)
