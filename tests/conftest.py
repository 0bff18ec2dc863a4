import pytest

from config.settings import CalculatorConfig


@pytest.fixture
def strict_config():
    config = CalculatorConfig()
    config.strict_tokens = True
    return config
