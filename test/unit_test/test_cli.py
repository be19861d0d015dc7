from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from pattern_catalog.catalog import PatternCategory, PatternRegistry, pattern, render_readme
from pattern_catalog.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def drifted_registry() -> PatternRegistry:
    registry = PatternRegistry()

    @pattern(key="drifted", name="Drifted", category=PatternCategory.creational, expected_output=["a"],
             description="drifted", registry=registry)
    def demo(emit) -> None:
        emit("b")

    return registry


class TestListCommand:
    def test_lists_every_pattern(self, runner: CliRunner, registry: PatternRegistry) -> None:
        result = runner.invoke(main, ["list"])

        assert result.exit_code == 0
        rows = result.output.splitlines()
        assert len(rows) == len(registry)
        assert rows[0].startswith("abstract-factory")
        assert rows[0].endswith("Abstract Factory  (creational)")

    def test_filters_by_category(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["list", "--category", "structural"])

        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 7
        assert "(creational)" not in result.output

    def test_rejects_unknown_category(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["list", "--category", "functional"])

        assert result.exit_code == 2


class TestShowCommand:
    def test_shows_definition_and_output(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["show", "proxy"])

        assert result.exit_code == 0
        assert result.output.startswith("Proxy (structural)\n")
        assert "Expected output:\n  Access denied!\n" in result.output


class TestRunCommand:
    def test_runs_demo(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["run", "Strategy"])

        assert result.exit_code == 0
        assert result.output == "50000\n42500\n32500\n"

    def test_unknown_pattern(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["run", "monad"])

        assert result.exit_code == 2
        assert "Pattern not found: 'monad'" in result.output


class TestVerifyCommand:
    def test_all_pass(self, runner: CliRunner, registry: PatternRegistry) -> None:
        result = runner.invoke(main, ["verify"])

        assert result.exit_code == 0
        assert result.output.strip().endswith(f"{len(registry)} passed, 0 failed")

    def test_selected_keys(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["verify", "decorator", "state"])

        assert result.exit_code == 0
        assert "2 passed, 0 failed" in result.output

    def test_mismatch_exits_non_zero(self, runner: CliRunner, drifted_registry: PatternRegistry) -> None:
        result = runner.invoke(main, ["verify"], obj={"registry": drifted_registry})

        assert result.exit_code == 1
        assert "drifted: output differs" in result.output
        assert "0 passed, 1 failed" in result.output


class TestReadmeCommand:
    def test_prints_readme(self, runner: CliRunner, registry: PatternRegistry) -> None:
        result = runner.invoke(main, ["readme", "--title", "Cars"])

        assert result.exit_code == 0
        assert result.output == render_readme(registry, title="Cars")

    def test_writes_readme(self, runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "PATTERNS.md"

        result = runner.invoke(main, ["readme", "--output", str(target), "--title", "Cars"])

        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8").startswith("# Cars\n")
        assert str(target) in result.output

    def test_creates_missing_output_directories(self, runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "nope" / "dir" / "PATTERNS.md"

        result = runner.invoke(main, ["readme", "--output", str(target)])

        assert result.exit_code == 0
        assert target.is_file()

    def test_unwritable_output_is_reported(self, runner: CliRunner, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        result = runner.invoke(main, ["readme", "--output", str(blocker / "PATTERNS.md")])

        assert result.exit_code == 1
        assert "Could not open file" in result.output
        assert not isinstance(result.exception, OSError)


def test_log_level_option_is_accepted(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--log-level", "debug", "run", "state"])

    assert result.exit_code == 0
    assert "red\nyellow\ngreen\nred\n" in result.output


def test_invalid_configuration_is_reported(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "loud")

    result = runner.invoke(main, ["list"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert "PATTERN_CATALOG_LOG_LEVEL" in result.output
