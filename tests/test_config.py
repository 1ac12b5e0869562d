"""
Context Configuration Tests

Tests SpatialContextConfig validation, YAML loading and context building.
"""

import json
import logging

import pytest

from geosect import (
    CartesianDistCalc,
    HaversineDistCalc,
    InvalidShapeError,
    LawOfCosinesDistCalc,
    Rectangle,
    SpatialContextConfig,
    WorldBoundsConfig,
)
from geosect.logging import StructuredLogger


def _write(tmp_path, text):
    path = tmp_path / "context.yaml"
    path.write_text(text)
    return path


def _config_events(caplog):
    return [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == "geosect.config"
    ]


class TestValidation:
    """Tests for SpatialContextConfig.__post_init__."""

    def test_defaults(self):
        config = SpatialContextConfig()
        assert config.geo
        assert config.calculator_name == "haversine"

    def test_cartesian_default_calculator(self):
        assert SpatialContextConfig(geo=False).calculator_name == "cartesian"

    def test_unknown_calculator_rejected(self):
        with pytest.raises(ValueError, match="Invalid distance_calculator"):
            SpatialContextConfig(distance_calculator="manhattan")

    def test_geo_with_cartesian_calculator_rejected(self):
        with pytest.raises(ValueError):
            SpatialContextConfig(geo=True, distance_calculator="cartesian")

    def test_cartesian_with_geodesic_calculator_rejected(self):
        with pytest.raises(ValueError):
            SpatialContextConfig(geo=False, distance_calculator="vincenty")

    def test_geo_world_bounds_rejected(self):
        with pytest.raises(ValueError, match="world_bounds"):
            SpatialContextConfig(geo=True, world_bounds=WorldBoundsConfig(0, 1, 0, 1))

    def test_inverted_world_bounds_rejected(self):
        with pytest.raises(ValueError):
            WorldBoundsConfig(min_x=10, max_x=0, min_y=0, max_y=1)


class TestFromDict:
    """Tests for SpatialContextConfig.from_dict."""

    def test_none_gives_defaults(self):
        assert SpatialContextConfig.from_dict(None) == SpatialContextConfig()

    def test_full_mapping(self):
        config = SpatialContextConfig.from_dict({
            'geo': False,
            'distance_calculator': "cartesian",
            'world_bounds': {'min_x': 0, 'max_x': 10, 'min_y': -5, 'max_y': 5},
        })
        assert not config.geo
        assert config.world_bounds == WorldBoundsConfig(0.0, 10.0, -5.0, 5.0)

    @pytest.mark.parametrize("geo", ["false", "no", 0, 1, None])
    def test_non_bool_geo_rejected(self, geo):
        with pytest.raises(ValueError, match="geo must be true or false"):
            SpatialContextConfig.from_dict({'geo': geo, 'distance_calculator': "cartesian"})

    def test_quoted_geo_in_yaml_rejected(self, tmp_path):
        path = _write(tmp_path, 'geo: "false"\ndistance_calculator: cartesian\n')
        with pytest.raises(ValueError, match="geo must be true or false"):
            SpatialContextConfig.from_yaml(path)

    def test_non_mapping_rejected(self):
        with pytest.raises(ValueError, match="mapping"):
            SpatialContextConfig.from_dict(["geo"])

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            SpatialContextConfig.from_dict({'geo': True, 'units': "km"})

    def test_missing_bounds_field_rejected(self):
        with pytest.raises(ValueError, match="max_y"):
            SpatialContextConfig.from_dict({
                'geo': False,
                'world_bounds': {'min_x': 0, 'max_x': 10, 'min_y': 0},
            })


class TestBuildContext:
    """Tests for SpatialContextConfig.build_context."""

    def test_geo_context(self):
        ctx = SpatialContextConfig(distance_calculator="law_of_cosines").build_context()
        assert ctx.geo
        assert isinstance(ctx.distance_calculator, LawOfCosinesDistCalc)

    def test_default_geo_context(self):
        assert isinstance(SpatialContextConfig().build_context().distance_calculator, HaversineDistCalc)

    def test_bounded_cartesian_context(self):
        config = SpatialContextConfig(geo=False, world_bounds=WorldBoundsConfig(0, 100, 0, 50))
        ctx = config.build_context()
        assert isinstance(ctx.distance_calculator, CartesianDistCalc)
        assert ctx.world_bounds == Rectangle(0, 100, 0, 50)
        with pytest.raises(InvalidShapeError):
            ctx.make_point(50, 60)


class TestFromYaml:
    """Tests for SpatialContextConfig.from_yaml."""

    def test_load_cartesian(self, tmp_path):
        path = _write(
            tmp_path,
            "geo: false\n"
            "distance_calculator: cartesian\n"
            "world_bounds:\n"
            "  min_x: 0\n"
            "  max_x: 1000\n"
            "  min_y: 0\n"
            "  max_y: 1000\n",
        )
        config = SpatialContextConfig.from_yaml(path)
        ctx = config.build_context()
        assert not ctx.geo
        assert ctx.world_bounds == Rectangle(0, 1000, 0, 1000)

    def test_load_accepts_str_path(self, tmp_path):
        path = _write(tmp_path, "geo: true\ndistance_calculator: vincenty\n")
        assert SpatialContextConfig.from_yaml(str(path)).calculator_name == "vincenty"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = _write(tmp_path, "")
        assert SpatialContextConfig.from_yaml(path) == SpatialContextConfig()

    def test_loaded_event(self, tmp_path, caplog):
        path = _write(tmp_path, "geo: true\n")
        with caplog.at_level(logging.INFO, logger="geosect.config"):
            SpatialContextConfig.from_yaml(path)

        events = _config_events(caplog)
        assert events[-1]['event'] == "config.loaded"
        assert events[-1]['metadata']['distance_calculator'] == "haversine"

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="geosect.config"):
            with pytest.raises(FileNotFoundError):
                SpatialContextConfig.from_yaml(tmp_path / "absent.yaml")

        events = _config_events(caplog)
        assert events[-1]['event'] == "error.config"
        assert events[-1]['exception']['type'] == "FileNotFoundError"

    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path, "geo: [true\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            SpatialContextConfig.from_yaml(path)

    def test_invalid_values_logged_and_reraised(self, tmp_path, caplog):
        path = _write(tmp_path, "geo: true\ndistance_calculator: cartesian\n")
        with caplog.at_level(logging.ERROR, logger="geosect.config"):
            with pytest.raises(ValueError, match="geodesic"):
                SpatialContextConfig.from_yaml(path)

        assert _config_events(caplog)[-1]['exception']['type'] == "ValueError"

    def test_custom_logger(self, tmp_path, caplog):
        logger = StructuredLogger("config-custom")
        path = _write(tmp_path, "geo: true\n")
        with caplog.at_level(logging.INFO, logger="geosect.config-custom"):
            SpatialContextConfig.from_yaml(path, logger=logger)

        names = {record.name for record in caplog.records}
        assert "geosect.config-custom" in names
