"""
Тесты для CLI

Coverage:
- Usage без аргументов, с одним и с лишними аргументами
- Проверки доступности входного файла и выходного каталога
- Код возврата и список ошибок
- JSON отчёт
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from src.cli import main
from src.core.contracts import validate_batch_report


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    path = tmp_path / "ids.txt"
    path.write_text("1337\n7890\n", encoding="utf-8")
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    path = tmp_path / "out"
    path.mkdir()
    return path


class TestUsage:
    """Тесты usage"""

    def test_no_arguments_prints_usage(self, runner: CliRunner) -> None:
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "Creates display pngs" in result.output

    def test_single_argument_fails(self, runner: CliRunner, input_file: Path) -> None:
        result = runner.invoke(main, [str(input_file)])
        assert result.exit_code == 1
        assert "Unsupported number of arguments" in result.output

    def test_extra_arguments_fail_with_usage(
        self, runner: CliRunner, input_file: Path, output_dir: Path
    ) -> None:
        """Больше двух аргументов → сообщение, usage и код 1"""
        result = runner.invoke(main, [str(input_file), str(output_dir), "extra"])
        assert result.exit_code == 1
        assert "Unsupported number of arguments: 3" in result.output
        assert "Creates display pngs" in result.output
        assert list(output_dir.iterdir()) == []


class TestPaths:
    """Тесты проверок путей"""

    def test_missing_input(self, runner: CliRunner, tmp_path: Path, output_dir: Path) -> None:
        result = runner.invoke(main, [str(tmp_path / "nope.txt"), str(output_dir)])
        assert result.exit_code == 1
        assert "ERROR: Input path" in result.output

    def test_input_is_directory(self, runner: CliRunner, output_dir: Path) -> None:
        result = runner.invoke(main, [str(output_dir), str(output_dir)])
        assert result.exit_code == 1
        assert "ERROR: Input path" in result.output

    def test_missing_output(self, runner: CliRunner, input_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(main, [str(input_file), str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "ERROR: Output path" in result.output


class TestRun:
    """Тесты запуска пакета"""

    def test_success(self, runner: CliRunner, input_file: Path, output_dir: Path) -> None:
        result = runner.invoke(main, [str(input_file), str(output_dir)])
        assert result.exit_code == 0
        assert sorted(p.name for p in output_dir.iterdir()) == ["1337.png", "7890.png"]

    def test_failures_listed(self, runner: CliRunner, tmp_path: Path, output_dir: Path) -> None:
        path = tmp_path / "mixed.txt"
        path.write_text("1337\n12a4\n99999\n", encoding="utf-8")

        result = runner.invoke(main, [str(path), str(output_dir)])

        assert result.exit_code == 1
        assert "ERROR: failures occurred:" in result.output
        assert "\t12a4\n" in result.output
        assert "\t99999\n" in result.output
        assert [p.name for p in output_dir.iterdir()] == ["1337.png"]

    def test_report_written(
        self, runner: CliRunner, tmp_path: Path, output_dir: Path
    ) -> None:
        path = tmp_path / "mixed.txt"
        path.write_text("1337\r\nabcd\r\n", encoding="utf-8")
        report_path = tmp_path / "report.json"

        result = runner.invoke(
            main, [str(path), str(output_dir), "--report", str(report_path)]
        )

        assert result.exit_code == 1
        report = json.loads(report_path.read_text(encoding="utf-8"))
        validate_batch_report(report)
        assert report["total"] == 2
        assert report["succeeded"] == ["1337"]
        assert report["failures"][0]["identifier"] == "abcd"

    def test_invalid_utf8_reported_without_loss(
        self, runner: CliRunner, tmp_path: Path, output_dir: Path
    ) -> None:
        """Недекодируемые байты выводятся как \\xNN, а не как U+FFFD"""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"12\xff4\n1337\n")
        report_path = tmp_path / "report.json"

        result = runner.invoke(
            main, [str(path), str(output_dir), "--report", str(report_path)]
        )

        assert result.exit_code == 1
        assert "\t12\\xff4\n" in result.output
        assert "�" not in result.output
        report = json.loads(report_path.read_text(encoding="utf-8"))
        validate_batch_report(report)
        assert report["failures"][0]["identifier"] == "12\\xff4"
        assert report["failures"][0]["reason"] == "invalid_character"
        assert report["succeeded"] == ["1337"]
