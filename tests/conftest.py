"""Pytest configuration and shared fixtures."""

import pytest

from grocerylist.items import GroceryItem
from grocerylist.logging_config import clear_context

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


@pytest.fixture(autouse=True)
def _reset_logging_context():
    """Keep logging context variables from leaking between tests."""
    yield
    clear_context()


# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def recipe_lines():
    """A typical recipe ingredient block."""
    return [
        "1 1/2 cups milk",
        "2 large eggs",
        "1/2 cup of sugar",
        "10-15 sun-dried tomatoes, chopped",
        "2 tbsp finely chopped parsley",
        "salt to taste",
        "1 tsp vanilla extract (optional)",
        "",
    ]


# =============================================================================
# Grocery List Fixtures
# =============================================================================


@pytest.fixture
def pantry_list():
    """Grocery list already on screen."""
    return [
        GroceryItem(name="Flour", quantity=1, unit="cup"),
        GroceryItem(name="eggs", quantity=2, unit=""),
        GroceryItem(name="butter", quantity=1, unit="cup"),
    ]


@pytest.fixture
def saved_list():
    """Saved grocery list being merged in."""
    return [
        GroceryItem(name="flour", quantity=0.5, unit="cup"),
        GroceryItem(name="milk", quantity=1, unit="cup"),
        GroceryItem(name="Butter", quantity=8, unit="tablespoon"),
        GroceryItem(name="Eggs", quantity=3, unit=""),
    ]
