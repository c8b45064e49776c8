import pytest

from selectbox.state import Item, SelectState, init
from selectbox.tests.helpers import FRUITS


@pytest.fixture
def fruits() -> list[Item[int]]:
    return list(FRUITS)


@pytest.fixture
def fruit_state(fruits) -> SelectState[int]:
    return init(fruits)
