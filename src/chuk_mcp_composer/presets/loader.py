"""
Preset loader - discovers and loads arrangement presets.

Presets can come from:
1. Built-in library (shipped with package)
2. Project presets (user's project/presets directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from chuk_mcp_composer.models.arrangement import ArrangementConfig

logger = logging.getLogger(__name__)


class PresetMetadata(BaseModel):
    """Lightweight preset info for listing."""

    name: str
    description: str
    key: str
    mode: str
    progression: str
    time_signature: str
    tempo: int
    bars: int

    @classmethod
    def from_preset(cls, name: str, description: str, config: ArrangementConfig) -> PresetMetadata:
        """Create metadata from a loaded preset."""
        return cls(
            name=name,
            description=description,
            key=config.key,
            mode=config.mode,
            progression=config.progression,
            time_signature=config.time_signature,
            tempo=config.tempo,
            bars=config.bars,
        )


class PresetLoader:
    """
    Discovers and loads preset definitions.

    Presets are loaded from YAML files in the library and project directories.
    Project presets override library presets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the preset loader.

        Args:
            library_path: Path to built-in preset library
            project_path: Path to project presets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, tuple[str, ArrangementConfig]] = {}

    def list_presets(self) -> list[PresetMetadata]:
        """
        List all available presets.

        Returns presets from both library and project, with project
        presets taking precedence.
        """
        presets: dict[str, PresetMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                loaded = self._load_preset_file(path)
                if loaded:
                    description, config = loaded
                    presets[path.stem] = PresetMetadata.from_preset(path.stem, description, config)

        return list(presets.values())

    def get_preset(self, name: str) -> ArrangementConfig | None:
        """
        Get a preset by name.

        Project presets take precedence over library presets.

        Args:
            name: Preset name (file stem)

        Returns:
            ArrangementConfig if found, None otherwise
        """
        loaded = self._get(name)
        return loaded[1] if loaded else None

    def describe_preset(self, name: str) -> dict[str, Any] | None:
        """Get a preset's description and full configuration."""
        loaded = self._get(name)
        if loaded is None:
            return None
        description, config = loaded
        return {"name": name, "description": description, "config": config.to_yaml_dict()}

    def save_preset(self, name: str, config: ArrangementConfig, description: str = "") -> Path:
        """
        Save a configuration as a project preset.

        Args:
            name: Preset name (file stem)
            config: Configuration to save
            description: One-line description

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {"description": description}
        data.update(config.to_yaml_dict())

        path = self.project_path / f"{name}.yaml"
        path.write_text(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))

        # Invalidate cache
        self._cache.pop(name, None)

        return path

    def _get(self, name: str) -> tuple[str, ArrangementConfig] | None:
        # Check cache
        if name in self._cache:
            return self._cache[name]

        # Try project first, then fall back to library
        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                loaded = self._load_preset_file(path)
                if loaded:
                    self._cache[name] = loaded
                    return loaded

        return None

    def _load_preset_file(self, path: Path) -> tuple[str, ArrangementConfig] | None:
        """Load a preset from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
            return self._parse_preset(path.stem, data)
        except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
            logger.warning("Skipping invalid preset %s: %s", path, e)
            return None

    def _parse_preset(self, name: str, data: dict[str, Any]) -> tuple[str, ArrangementConfig]:
        """Parse a preset from YAML data."""
        fields = dict(data)
        description = str(fields.pop("description", ""))
        fields.setdefault("name", name)
        return description, ArrangementConfig.from_yaml_dict(fields)

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()
