"""Tests for settings loading and the pipeline entry point."""

import asyncio
import io
import json

import pytest
from rich.console import Console

from flashset.pipeline import Pipeline
from flashset.settings import Settings


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep .env and flashset.yaml of the working directory out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in ["FLASHSET__TOKEN", "FLASHSET__API_BASE_URL", "FLASHSET__EXPORT_FORMAT"]:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings sources."""

    def test_defaults(self):
        """Defaults need no configuration."""
        settings = Settings()
        assert settings.api_base_url == "http://localhost:5000"
        assert settings.export_format == "json"
        assert settings.token_value() is None
        assert settings.request_timeout is None

    def test_environment(self, monkeypatch):
        """Prefixed environment variables are picked up."""
        monkeypatch.setenv("FLASHSET__TOKEN", "abc")
        monkeypatch.setenv("FLASHSET__EXPORT_FORMAT", "csv")
        settings = Settings()
        assert settings.token_value() == "abc"
        assert settings.export_format == "csv"

    def test_yaml_file(self, tmp_path):
        """flashset.yaml in the working directory is read."""
        (tmp_path / "flashset.yaml").write_text("api_base_url: http://sets.example\n", encoding="utf-8")
        assert Settings().api_base_url == "http://sets.example"

    def test_token_masked_in_dump(self, monkeypatch):
        """The token is never dumped in clear text."""
        monkeypatch.setenv("FLASHSET__TOKEN", "abc")
        assert Settings().model_dump(mode="json")["token"] != "abc"


class TestPipeline:
    """Tests for Pipeline.run."""

    def test_show_formats(self, console):
        """Format help prints both samples."""
        ok = asyncio.run(Pipeline(Settings(show_formats=True), console).run())
        output = console.file.getvalue()
        assert ok
        assert '"translationLang": "PL"' in output
        assert "Set Name,Description" in output

    def test_nothing_to_do(self, console):
        """Without an import or export there is nothing to run."""
        assert asyncio.run(Pipeline(Settings(), console).run())

    def test_import_then_export(self, backend, console, tmp_path):
        """An import and an export both run and report their outcome."""
        source = tmp_path / "in.json"
        source.write_text(json.dumps({"set": {"name": "Trip"}, "flashcards": []}), encoding="utf-8")
        backend.sets = [{"id": "s9", "name": "Holiday"}]
        backend.export_bodies["csv"] = "Set Name\nHoliday\n"

        async def scenario(base_url):
            settings = Settings(
                api_base_url=base_url,
                token="t",
                import_file=source,
                export_set_id="s9",
                export_format="csv",
                output_dir=tmp_path / "out",
            )
            return await Pipeline(settings, console).run()

        assert backend.run(scenario)
        assert (tmp_path / "out" / "Holiday.csv").read_text(encoding="utf-8") == "Set Name\nHoliday\n"
        output = console.file.getvalue()
        assert "Set 'Trip' imported successfully with 0 flashcards" in output
        assert "Set exported to" in output

    def test_failed_import_reported(self, console, tmp_path):
        """A failed step makes the run unsuccessful."""
        settings = Settings(import_file=tmp_path / "notes.txt")
        ok = asyncio.run(Pipeline(settings, console).run())
        assert not ok
        assert "Please select a JSON or CSV file" in console.file.getvalue()
