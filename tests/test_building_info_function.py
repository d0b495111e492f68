# tests/test_building_info_function.py
import pytest
from building_info_function import generate_configurations
from core.model_config import ConfigLoader


@pytest.fixture
def raw_config():
    return {
        "number_of_stories": 6,
        "plan_length_m": 24.0,
        "plan_width_m": 18.0,
        "ss": 0.8,
        "s1": 0.3,
    }


class TestGenerateConfigurations:
    def test_defaults(self, raw_config):
        """Test a minimal parameter set produces a loadable configuration."""
        config = generate_configurations(raw_config)
        assert config["seismic"]["site_class"] == "SD"
        assert config["seismic"]["importance"] == 1.0
        assert config["loads"]["live_load"] == 250
        assert config["geometry"]["height_per_floor"] == 3.5

        inputs = ConfigLoader.build_inputs(config)
        assert inputs.geometry.number_of_floors == 6

    def test_occupancy_and_risk_category(self, raw_config):
        """Test occupancy selects live load and risk category selects importance."""
        raw_config["occupancy"] = "storage"
        raw_config["risk_category"] = "IV"
        config = generate_configurations(raw_config)
        assert config["loads"]["live_load"] == 600
        assert config["seismic"]["importance"] == 1.5

    def test_unknown_occupancy(self, raw_config):
        """Test unknown occupancies are rejected."""
        raw_config["occupancy"] = "stadium"
        with pytest.raises(ValueError, match="occupancy"):
            generate_configurations(raw_config)

    def test_unknown_risk_category(self, raw_config):
        """Test unknown risk categories are rejected."""
        raw_config["risk_category"] = "V"
        with pytest.raises(ValueError, match="risk_category"):
            generate_configurations(raw_config)
