"""Shared fixtures for rack word finder tests."""

from __future__ import annotations

from collections import Counter

import pytest

from rackwords.dictionary import Dictionary


@pytest.fixture
def small_dictionary() -> Dictionary:
    """~40 hand-picked words added directly. No file I/O."""
    return Dictionary([
        # 2-letter
        "AT", "TA", "AS", "ID", "DO", "GO",
        # 3-letter
        "CAT", "ACT", "BAT", "DOG", "GOD", "SAT", "TEA", "EAT", "ATE",
        "OAT", "TAO",
        # 4-letter
        "CATS", "SCAT", "CAST", "ACTS", "BATS", "DOGS", "GODS", "SEAT",
        "EATS", "TEAS", "COAT", "TACO", "DOTE",
        # 5-letter
        "COATS", "TACOS", "SCATS", "CATCH", "TEACH", "CHEAT",
        # 6+
        "CATTLE", "SCATTER", "CATCATS",
    ])


@pytest.fixture
def cat_rack() -> Counter[str]:
    """Rack that can extend CAT into several words."""
    return Counter("SOE")


@pytest.fixture
def empty_rack() -> Counter[str]:
    return Counter()
