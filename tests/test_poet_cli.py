"""
Smoke tests for the graph-poet command line.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from poet_cli import main


MUGAR = "This is a test of the Mugar Omni Theater sound system.\n"


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    path = tmp_path / "mugar.txt"
    path.write_text(MUGAR, encoding="utf-8")
    return path


@pytest.mark.parametrize("representation", ["edges", "vertices"])
def test_poem_from_argument(corpus: Path, representation: str):
    result = CliRunner().invoke(
        main, ["--corpus", str(corpus), "--representation", representation, "Test the system."]
    )
    assert result.exit_code == 0, result.output
    assert result.output == "Test of the system.\n"


def test_poem_from_stdin(corpus: Path):
    result = CliRunner().invoke(main, ["--corpus", str(corpus)], input="Test the system.\n")
    assert result.exit_code == 0, result.output
    assert result.output == "Test of the system.\n"


def test_config_supplies_corpus(tmp_path: Path, corpus: Path):
    cfg = tmp_path / "poet.yml"
    cfg.write_text("corpus: mugar.txt\nrepresentation: vertices\n")

    result = CliRunner().invoke(main, ["--config", str(cfg), "--show-graph", "Test the system."])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "this -> [is (1)]"
    assert lines[-1] == "Test of the system."


def test_missing_corpus_reports_error(tmp_path: Path):
    result = CliRunner().invoke(main, ["--corpus", str(tmp_path / "gone.txt"), "a b"])
    assert result.exit_code == 1
    assert "gone.txt" in result.output


def test_no_corpus_is_usage_error():
    result = CliRunner().invoke(main, ["a b"])
    assert result.exit_code == 2
    assert "no corpus given" in result.output


def test_bad_config_reports_error(tmp_path: Path):
    cfg = tmp_path / "poet.yml"
    cfg.write_text("representation: matrix\n")

    result = CliRunner().invoke(main, ["--config", str(cfg), "a b"])
    assert result.exit_code == 1
    assert "representation" in result.output
