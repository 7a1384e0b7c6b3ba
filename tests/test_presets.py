"""
Tests for the preset loader.
"""

from pathlib import Path

import pytest

from chuk_mcp_composer.compiler import ArrangementCompiler
from chuk_mcp_composer.models import ArrangementConfig
from chuk_mcp_composer.presets import PresetLoader

LIBRARY_PRESETS = ["circle_of_fifths", "dorian_waltz", "playground", "scale_climb"]


class TestLibrary:
    """Tests for the built-in presets."""

    def test_lists_library(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        names = [p.name for p in loader.list_presets()]
        assert names == LIBRARY_PRESETS

    def test_default_library_path(self) -> None:
        loader = PresetLoader()
        assert loader.get_preset("playground") is not None

    def test_get_preset(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        preset = loader.get_preset("dorian_waltz")

        assert preset is not None
        assert preset.name == "dorian_waltz"
        assert preset.time_signature == "3/4"
        assert preset.instruments.bass == 43

    def test_missing_preset(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        assert loader.get_preset("nope") is None
        assert loader.describe_preset("nope") is None

    def test_describe(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        described = loader.describe_preset("circle_of_fifths")

        assert described["description"].startswith("Descending fifths")
        assert described["config"]["progression"] == "circle"

    @pytest.mark.parametrize("name", LIBRARY_PRESETS)
    def test_every_preset_compiles(self, library_path: Path, name: str) -> None:
        preset = PresetLoader(library_path=library_path).get_preset(name)
        config = ArrangementConfig.from_yaml_dict({**preset.to_yaml_dict(), "seed": 1})
        result = ArrangementCompiler().compile(config)

        assert result.total_bars == preset.bars
        assert result.midi_file.type == 0


class TestProjectPresets:
    """Tests for project presets."""

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "playground.yaml").write_text("description: Mine\ntempo: 90\n")
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)

        assert loader.get_preset("playground").tempo == 90
        listed = {p.name: p for p in loader.list_presets()}
        assert listed["playground"].description == "Mine"
        assert len(listed) == len(LIBRARY_PRESETS)

    def test_invalid_files_are_skipped(self, library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "broken.yaml").write_text("key: H\n")
        (temp_dir / "garbled.yaml").write_text("key: [unclosed\n")
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)

        assert loader.get_preset("broken") is None
        assert loader.get_preset("garbled") is None
        assert [p.name for p in loader.list_presets()] == LIBRARY_PRESETS

    def test_save_and_reload(self, library_path: Path, temp_dir: Path) -> None:
        loader = PresetLoader(library_path=library_path, project_path=temp_dir / "presets")
        config = ArrangementConfig(name="blues", key="E", tempo=70, seed=4)

        path = loader.save_preset("blues", config, "Slow blues")

        assert path.exists()
        assert loader.get_preset("blues") == config
        assert loader.describe_preset("blues")["description"] == "Slow blues"

    def test_save_requires_project_path(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        with pytest.raises(ValueError, match="No project path"):
            loader.save_preset("x", ArrangementConfig())

    def test_cache(self, library_path: Path, temp_dir: Path) -> None:
        preset_file = temp_dir / "cached.yaml"
        preset_file.write_text("tempo: 100\n")
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        assert loader.get_preset("cached").tempo == 100

        preset_file.write_text("tempo: 110\n")
        assert loader.get_preset("cached").tempo == 100

        loader.clear_cache()
        assert loader.get_preset("cached").tempo == 110
