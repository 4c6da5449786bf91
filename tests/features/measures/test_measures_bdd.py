"""BDD tests for request timeline measures."""

import pytest
from pytest_bdd import scenarios

scenarios("measures.feature")

pytestmark = [pytest.mark.tier(2), pytest.mark.core]
