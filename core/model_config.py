# src/core/model_config.py
"""
Configuration loading and validation.
Turns a dict or YAML file into the input records of a seismic analysis.
"""
import os
import yaml
from dataclasses import dataclass
from typing import Dict, Any, Optional, Union
from pathlib import Path

from core.model_state import (
    Geometry,
    Loads,
    MaterialProperties,
    SeismicParameters,
    SiteClass,
    SoilData,
    _validate_positive,
)


REQUIRED_KEYS = {
    'seismic': ['ss', 's1', 'site_class'],
    'geometry': ['length', 'width', 'number_of_floors', 'height_per_floor'],
    'loads': ['dead_load', 'live_load'],
}


@dataclass(frozen=True)
class AnalysisInputs:
    """Validated input records for one analysis run."""

    seismic: SeismicParameters
    soil: SoilData
    geometry: Geometry
    loads: Loads
    materials: MaterialProperties
    analytical_period: Optional[float] = None

    def __post_init__(self):
        if self.analytical_period is not None:
            _validate_positive(self.analytical_period, 'analytical_period')


class ConfigLoader:
    """Loads and validates analysis configuration."""

    @staticmethod
    def load(config_input: Union[Dict, str, Path]) -> Dict[str, Any]:
        """Load configuration from dict or YAML file.

        Args:
            config_input: Dictionary or path to YAML file

        Returns:
            Validated configuration dictionary

        Raises:
            FileNotFoundError: If YAML file missing
            KeyError: If a required section or key is missing
            ValueError: If configuration invalid
        """
        if isinstance(config_input, dict):
            config = config_input
        elif isinstance(config_input, (str, os.PathLike)):
            config = ConfigLoader._load_yaml(config_input)
        else:
            raise TypeError("config_input must be dict or file path")

        return ConfigLoader._validate(config)

    @staticmethod
    def build_inputs(config_input: Union[Dict, str, Path]) -> AnalysisInputs:
        """Load configuration and build the input records.

        Raises:
            ValueError: If any record fails validation
        """
        config = ConfigLoader.load(config_input)
        seismic = config['seismic']
        geometry = config['geometry']
        loads = config['loads']

        return AnalysisInputs(
            seismic=SeismicParameters(
                ss=seismic['ss'],
                s1=seismic['s1'],
                site_class=seismic['site_class'],
                r=seismic['r'],
                importance=seismic['importance'],
            ),
            soil=SoilData(site_class=config['soil']['site_class']),
            geometry=Geometry(
                length=geometry['length'],
                width=geometry['width'],
                number_of_floors=geometry['number_of_floors'],
                height_per_floor=geometry['height_per_floor'],
            ),
            loads=Loads(
                dead_load=loads['dead_load'],
                live_load=loads['live_load'],
                partition_load=loads['partition_load'],
            ),
            materials=MaterialProperties(fc=config['materials']['fc']),
            analytical_period=config['analysis']['analytical_period'],
        )

    @staticmethod
    def _load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
        """Load YAML configuration file."""
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, 'r') as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file must contain a mapping: {path}")
        return config

    @staticmethod
    def _validate(config: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and enrich configuration.

        Args:
            config: Raw configuration dictionary

        Returns:
            Validated configuration with defaults applied

        Raises:
            KeyError: If a required section or key is missing
            ValueError: If site classes disagree
        """
        for section, keys in REQUIRED_KEYS.items():
            if section not in config:
                raise KeyError(f"config['{section}'] is required")
            if not isinstance(config[section], dict):
                raise ValueError(f"config['{section}'] must be a mapping")
            missing = [k for k in keys if k not in config[section]]
            if missing:
                raise KeyError(f"config['{section}'] missing required keys: {missing}")

        # Set defaults
        seismic = config['seismic']
        seismic.setdefault('r', 8.0)
        seismic.setdefault('importance', 1.0)

        config['loads'].setdefault('partition_load', 0.0)
        config.setdefault('materials', {}).setdefault('fc', 25.0)

        analysis = config.setdefault('analysis', {})
        analysis.setdefault('analytical_period', None)

        # Soil section mirrors the seismic site class unless given explicitly
        soil = config.setdefault('soil', {})
        soil.setdefault('site_class', seismic['site_class'])
        if SiteClass.parse(soil['site_class']) is not SiteClass.parse(seismic['site_class']):
            raise ValueError(
                f"config['soil']['site_class'] ({soil['site_class']}) must match "
                f"config['seismic']['site_class'] ({seismic['site_class']})"
            )

        return config
