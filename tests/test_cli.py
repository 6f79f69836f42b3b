"""
Tests for the command-line entry point

Tests covering:
1. Full run: report printed and written, exit 0
2. Missing input: guidance printed, empty-collection message, exit 0
3. Sample data mode
4. Unwritable report: error on stderr, exit 1
5. Optional PDF mirror
"""

import logging
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.analytics import EMPTY_COLLECTION_MESSAGE
from reporting.cli import main
from reporting.text_report import REPORT_HEADER
from utils.config import Config


ENV_VARS = [
    "REALESTATE_INPUT_FILE",
    "REALESTATE_OUTPUT_FILE",
    "REALESTATE_PDF_FILE",
    "REALESTATE_LOG_FILE",
    "REALESTATE_LOG_LEVEL",
    "REALESTATE_TARGET_CITY",
    "REALESTATE_USE_SAMPLE_DATA",
]


@pytest.fixture
def env(tmp_path, monkeypatch):
    """Isolated environment with all files under tmp_path."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REALESTATE_INPUT_FILE", str(tmp_path / "realestates.txt"))
    monkeypatch.setenv("REALESTATE_OUTPUT_FILE", str(tmp_path / "outputRealEstate.txt"))
    monkeypatch.setenv("REALESTATE_LOG_FILE", str(tmp_path / "realEstateApp.log"))
    yield tmp_path
    # Release the log file handler installed by the CLI
    for handler in logging.getLogger().handlers[:]:
        logging.getLogger().removeHandler(handler)
        handler.close()


@pytest.fixture
def input_file(env):
    path = env / "realestates.txt"
    path.write_text(
        "REALESTATE#Budapest#250000#100#4#FLAT\n"
        "PANEL#Debrecen#120000#35#2#FLAT#0#yes\n"
        "REALESTATE#Szeged#not-a-price#40#1#FARM\n",
        encoding="utf-8",
    )
    return path


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

        config = Config.load()

        assert config.input_file == "realestates.txt"
        assert config.output_file == "outputRealEstate.txt"
        assert config.pdf_file is None
        assert config.target_city == "Budapest"
        assert config.use_sample_data is False

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("REALESTATE_TARGET_CITY", "Debrecen")
        monkeypatch.setenv("REALESTATE_USE_SAMPLE_DATA", "TRUE")

        config = Config.load()

        assert config.target_city == "Debrecen"
        assert config.use_sample_data is True
        assert config.to_dict()["target_city"] == "Debrecen"


class TestMain:

    def test_full_run(self, env, input_file, capsys):
        exit_code = main([])

        captured = capsys.readouterr()
        written = (env / "outputRealEstate.txt").read_text(encoding="utf-8")

        assert exit_code == 0
        assert "Successfully loaded 2 properties from file." in captured.out
        assert written.startswith(REPORT_HEADER)
        assert written in captured.out
        assert "Results written to" in captured.out
        assert "Skipped 1 malformed line(s)" in captured.err

    def test_log_file_written(self, env, input_file):
        main([])

        assert (env / "realEstateApp.log").exists()

    def test_missing_input(self, env, capsys):
        exit_code = main([])

        captured = capsys.readouterr()

        assert exit_code == 0
        assert "File not found" in captured.err
        assert EMPTY_COLLECTION_MESSAGE in captured.out
        assert "1. Average unit price" not in captured.out
        assert not (env / "outputRealEstate.txt").exists()

    def test_sample_data(self, env, monkeypatch, capsys):
        monkeypatch.setenv("REALESTATE_USE_SAMPLE_DATA", "true")

        exit_code = main([])

        captured = capsys.readouterr()

        assert exit_code == 0
        assert "Sample data loaded: 10 properties." in captured.out
        assert (env / "outputRealEstate.txt").exists()

    def test_unwritable_report(self, env, input_file, monkeypatch, capsys):
        monkeypatch.setenv("REALESTATE_OUTPUT_FILE", str(env))

        exit_code = main([])

        assert exit_code == 1
        assert "Error writing to output file" in capsys.readouterr().err

    def test_pdf_mirror(self, env, input_file, monkeypatch):
        monkeypatch.setenv("REALESTATE_PDF_FILE", str(env / "report.pdf"))

        assert main([]) == 0
        assert (env / "report.pdf").read_bytes().startswith(b"%PDF")
