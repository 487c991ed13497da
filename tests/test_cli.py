"""Tests for the command-line interface."""

import json

from typer.testing import CliRunner

from schedule_planner.cli import app

runner = CliRunner()


class TestPlanCommand:
    """Tests for the plan command."""

    def test_plan_and_export(self, catalog_file, config_dir, tmp_path):
        output = tmp_path / "schedules.json"
        result = runner.invoke(
            app,
            [
                "plan",
                str(catalog_file),
                "01:198:211",
                "01:640:251",
                "--config",
                str(config_dir),
                "-o",
                str(output),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Schedules generated: 5" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["total_schedules"] == 5

    def test_options_override_config(self, catalog_file, config_dir, tmp_path):
        (config_dir / "options.json").write_text('{"batchSize": 1}', encoding="utf-8")
        output = tmp_path / "schedules"
        result = runner.invoke(
            app,
            [
                "plan",
                str(catalog_file),
                "01:198:211",
                "01:640:251",
                "--config",
                str(config_dir),
                "--batch-size",
                "2",
                "--by-points",
                "-o",
                str(output),
                "-f",
                "csv",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Schedules generated: 2" in result.output
        assert (tmp_path / "schedules.csv").exists()

    def test_requirements_file(self, catalog_file, config_dir, tmp_path):
        requirements = tmp_path / "requirements.json"
        requirements.write_text('{"ALL": {"openStatus": true}}', encoding="utf-8")
        result = runner.invoke(
            app,
            [
                "plan",
                str(catalog_file),
                "01:198:211",
                "01:640:251",
                "--config",
                str(config_dir),
                "-r",
                str(requirements),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Matching all requirements: 3" in result.output

    def test_invalid_course(self, catalog_file, config_dir):
        result = runner.invoke(
            app, ["plan", str(catalog_file), "01:000:101", "--config", str(config_dir)]
        )
        assert result.exit_code == 1
        assert "invalid subject code" in result.output

    def test_course_without_sections(self, catalog_file, config_dir):
        result = runner.invoke(
            app, ["plan", str(catalog_file), "01:640:999", "--config", str(config_dir)]
        )
        assert result.exit_code == 1
        assert "01:640:999" in result.output

    def test_malformed_config_file(self, catalog_file, config_dir):
        (config_dir / "travel-rules.json").write_text("[]", encoding="utf-8")
        result = runner.invoke(
            app, ["plan", str(catalog_file), "01:198:211", "--config", str(config_dir)]
        )
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert not isinstance(result.exception, AttributeError)


class TestSectionsCommand:
    """Tests for the sections command."""

    def test_lists_sections(self, catalog_file, config_dir):
        result = runner.invoke(
            app, ["sections", str(catalog_file), "01:198:211", "--config", str(config_dir)]
        )
        assert result.exit_code == 0, result.output
        assert "COMPUTER SCIENCE" in result.output
        assert "10001" in result.output
        assert "10002" in result.output

    def test_no_sections(self, catalog_file, config_dir):
        result = runner.invoke(
            app, ["sections", str(catalog_file), "01:640:999", "--config", str(config_dir)]
        )
        assert result.exit_code == 1
