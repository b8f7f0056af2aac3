from pathlib import Path

import pytest

from testing_lab.context import StorefrontContext
from testing_lab.rules.loader import load_rules
from testing_lab.rules.models import LabRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> LabRules:
    """Load REAL rules from project root."""
    return load_rules(rules_path)


@pytest.fixture
def storefront_ctx(rules: LabRules) -> StorefrontContext:
    """
    Creates a StorefrontContext over the dev adapters with the project rules.
    """
    return StorefrontContext.create(rules)
