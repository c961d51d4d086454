"""
Global test fixtures for the FuzzyVis project.
"""

import pytest

from fuzzyvis.config import clear_settings_cache
from fuzzyvis.fuzzy.config import CrispVariableConfig

TEMPERATURE_YAML = """
id: temperature
name: Temperature
min: 0
max: 40
fuzzy_sets:
  - id: cold
    label: Cold
    function: leftShoulder
    parameters: [8, 18]
  - id: comfortable
    label: Comfortable
    function: trapezoidal
    parameters: [14, 19, 24, 28]
  - id: hot
    label: Hot
    function: rightShoulder
    parameters: [24, 34]
"""


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def temperature_dict():
    """Crisp variable definition with three sets covering [0, 40]."""
    return {
        "id": "temperature",
        "name": "Temperature",
        "min": 0,
        "max": 40,
        "fuzzy_sets": [
            {
                "id": "cold",
                "label": "Cold",
                "function": "leftShoulder",
                "parameters": [8, 18],
            },
            {
                "id": "comfortable",
                "label": "Comfortable",
                "function": "trapezoidal",
                "parameters": [14, 19, 24, 28],
            },
            {
                "id": "hot",
                "label": "Hot",
                "function": "rightShoulder",
                "parameters": [24, 34],
            },
        ],
    }


@pytest.fixture
def temperature_variable(temperature_dict):
    """Validated crisp variable built from temperature_dict."""
    return CrispVariableConfig.model_validate(temperature_dict)


@pytest.fixture
def temperature_yaml(tmp_path):
    """Path to a YAML file holding the temperature variable."""
    path = tmp_path / "temperature.yaml"
    path.write_text(TEMPERATURE_YAML, encoding="utf-8")
    return path
