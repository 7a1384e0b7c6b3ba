"""
Tests for the server command line.
"""

from pathlib import Path

import pytest

from chuk_mcp_composer.server import (
    OUTPUT_DIR_ENV,
    PRESETS_DIR_ENV,
    apply_directories,
    build_parser,
    directory_from_env,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start unset and restore whatever the test exports."""
    for name in (OUTPUT_DIR_ENV, PRESETS_DIR_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])

        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.output_dir is None
        assert args.presets_dir is None
        assert not args.debug

    def test_directories(self, temp_dir: Path) -> None:
        args = build_parser().parse_args(
            ["--output-dir", str(temp_dir / "out"), "--presets-dir", str(temp_dir / "mine")]
        )
        assert args.output_dir == temp_dir / "out"
        assert args.presets_dir == temp_dir / "mine"

    def test_rejects_unknown_transport(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--transport", "sse"])


class TestDirectories:
    """Tests for handing directories to the server module."""

    def test_unset_uses_default(self, temp_dir: Path) -> None:
        assert directory_from_env(OUTPUT_DIR_ENV, temp_dir / "output") == temp_dir / "output"

    def test_apply_then_read_back(self, temp_dir: Path) -> None:
        args = build_parser().parse_args(
            ["--output-dir", str(temp_dir / "out"), "--presets-dir", str(temp_dir / "mine")]
        )
        apply_directories(args)

        assert directory_from_env(OUTPUT_DIR_ENV, Path("unused")) == (temp_dir / "out").resolve()
        assert directory_from_env(PRESETS_DIR_ENV, Path("unused")) == (temp_dir / "mine").resolve()

    def test_missing_option_leaves_env_alone(self, temp_dir: Path) -> None:
        apply_directories(build_parser().parse_args(["--output-dir", str(temp_dir)]))
        assert directory_from_env(PRESETS_DIR_ENV, temp_dir / "presets") == temp_dir / "presets"
