import pytest

from saves import ANTIQUITY_CIVS, EXPLORATION_CIVS, LEADERS, build_save


@pytest.fixture
def antiquity_save() -> bytes:
    return build_save(51, "AGE_ANTIQUITY", ANTIQUITY_CIVS, LEADERS)


@pytest.fixture
def exploration_save() -> bytes:
    return build_save(1, "AGE_EXPLORATION", EXPLORATION_CIVS, LEADERS)
