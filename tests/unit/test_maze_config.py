"""
Unit tests for maze settings and their YAML persistence.
"""

import pytest
from pydantic import ValidationError

from gridmaze import ConfigurationError, MazeAlgorithm, MazeCoordinates, MazeSize
from gridmaze.config import (
    CoordinatesConfig,
    MazeSettings,
    load_settings,
    save_settings,
    settings_from_config,
    settings_to_config,
)


class TestMazeSettings:
    """Test settings defaults and validation."""

    def test_defaults(self):
        settings = MazeSettings()

        assert settings.algorithm is MazeAlgorithm.BACKTRACKER
        assert settings.size == MazeSize(5, 5)
        assert settings.force_edge_doors
        assert not settings.generate_path
        assert not settings.create_doors
        assert not settings.has_endpoint

    def test_algorithm_from_value(self):
        assert MazeSettings(algorithm="hunt_and_kill").algorithm is MazeAlgorithm.HUNT_AND_KILL

    def test_unknown_algorithm(self):
        with pytest.raises(ValidationError):
            MazeSettings(algorithm="wilsons")

    @pytest.mark.parametrize("width", [0, -5, 10000])
    def test_width_range(self, width):
        with pytest.raises(ValidationError):
            MazeSettings(width=width)

    def test_largest_size(self):
        settings = MazeSettings(width=9999, height=1)
        assert settings.size == MazeSize(9999, 1)

    def test_validate_assignment(self):
        settings = MazeSettings()

        with pytest.raises(ValidationError):
            settings.height = 0

    def test_coordinates_from_pairs(self):
        settings = MazeSettings(path_start=(1, 2), path_end=MazeCoordinates(3, 4))

        assert settings.path_start == CoordinatesConfig(x=1, y=2)
        assert settings.path_end.to_coordinates() == MazeCoordinates(3, 4)

    def test_coordinates_from_mapping(self):
        settings = MazeSettings(endpoint={"x": 7, "y": 0})
        assert settings.endpoint.x == 7

    def test_negative_coordinates_rejected(self):
        with pytest.raises(ValidationError):
            MazeSettings(entrance_door=(-1, 0))

    def test_coordinates_round_trip(self):
        config = CoordinatesConfig.from_coordinates((5, 6))
        assert config.to_coordinates() == MazeCoordinates(5, 6)


class TestSettingsYaml:
    """Test YAML persistence through OmegaConf."""

    def test_round_trip(self, tmp_path):
        settings = MazeSettings(
            algorithm=MazeAlgorithm.ELLER,
            seed=-123,
            width=31,
            height=17,
            generate_path=True,
            path_end=(30, 16),
            create_doors=True,
            has_endpoint=True,
            endpoint=(4, 4),
        )

        path = save_settings(settings, tmp_path / "nested" / "maze.yaml")

        assert path.exists()
        assert load_settings(path) == settings

    def test_yaml_uses_plain_values(self, tmp_path):
        path = save_settings(MazeSettings(algorithm="prim"), tmp_path / "maze.yaml")

        text = path.read_text()
        assert "algorithm: prim" in text
        assert "width: 5" in text

    def test_overrides(self, tmp_path):
        path = save_settings(MazeSettings(width=11), tmp_path / "maze.yaml")

        settings = load_settings(path, width=21, algorithm="sidewinder")

        assert settings.width == 21
        assert settings.algorithm is MazeAlgorithm.SIDEWINDER

    def test_interpolation(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("width: 21\nheight: ${width}\nalgorithm: kruskal\npath_end: {x: 20, y: 20}\n")

        settings = load_settings(path)

        assert settings.size == MazeSize(21, 21)
        assert settings.path_end.x == 20

    def test_partial_file_uses_defaults(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("seed: 9\n")

        settings = load_settings(path)

        assert settings.seed == 9
        assert settings.width == 5

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("width: -1\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)

        assert exc_info.value.error_code == "INVALID_CONFIGURATION"
        assert exc_info.value.diagnostic_data["parameter"] == "width"

    def test_nested_invalid_value(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("path_start: {x: -3, y: 0}\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(path)

        assert exc_info.value.diagnostic_data["parameter"] == "path_start.x"

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigurationError):
            load_settings(path)

    def test_unresolvable_interpolation(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("width: ${missing}\n")

        with pytest.raises(ConfigurationError):
            load_settings(path)


class TestConfigConversion:
    def test_to_config(self):
        config = settings_to_config(MazeSettings(seed=4))

        assert config.seed == 4
        assert config.algorithm == "backtracker"
        assert config.path_start.x == 0

    def test_from_dict(self):
        assert settings_from_config({"width": 7}).width == 7

    def test_from_non_mapping(self):
        with pytest.raises(ConfigurationError):
            settings_from_config([1, 2])
