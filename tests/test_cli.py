"""
Tests for the oajournal CLI.
"""

import json

import pytest
from typer.testing import CliRunner

from oajournal.cli import main as cli_main
from oajournal.core.response import JournalInfoList
from oajournal.exceptions import ConfigurationError
from oajournal.exceptions import NetworkError
from oajournal.models.summary import ResultSummary

runner = CliRunner()


@pytest.fixture
def recorded(monkeypatch):
    """Replace the batch lookup with a fake that records its arguments."""
    calls = {}

    def fake_get_journals_info(journals, email=None, **kwargs):
        calls["journals"] = list(journals)
        calls["email"] = email
        return JournalInfoList(
            ResultSummary(
                journal=name,
                match="exact",
                oa_source_name=name,
                oa_source_id="https://openalex.org/S1",
                oa_works_count=10,
                oa_source_issn="1402-2001",
            )
            for name in journals
        )

    monkeypatch.delenv("OPENALEX_EMAIL", raising=False)
    monkeypatch.setattr(cli_main, "get_journals_info", fake_get_journals_info)
    return calls


def test_cli_help():
    """Test that the CLI help works."""
    result = runner.invoke(cli_main.app, ["--help"])
    assert result.exit_code == 0
    assert "Resolve journal names to OpenAlex sources" in result.stdout


def test_lookup_json(recorded):
    result = runner.invoke(
        cli_main.app,
        ["--email", "someone@example.org", "lookup", "Oikos", "--format", "json"],
    )

    assert result.exit_code == 0
    records = json.loads(result.stdout)
    assert records[0]["journal"] == "Oikos"
    assert records[0]["match"] == "exact"
    assert records[0]["oa_field"] is None
    assert recorded["email"] == "someone@example.org"


def test_lookup_jsonl(recorded):
    result = runner.invoke(
        cli_main.app, ["lookup", "Oikos", "Ecology", "--format", "jsonl"]
    )

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert [json.loads(line)["journal"] for line in lines] == ["Oikos", "Ecology"]


def test_lookup_csv(recorded):
    result = runner.invoke(cli_main.app, ["lookup", "Oikos", "--format", "csv"])

    assert result.exit_code == 0
    header, row = result.stdout.strip().splitlines()
    assert header.startswith("journal,match,oa_source_name,oa_source_id")
    assert row.startswith("Oikos,exact,Oikos,https://openalex.org/S1,10")


def test_lookup_table(recorded):
    result = runner.invoke(cli_main.app, ["lookup", "Oikos"])

    assert result.exit_code == 0
    assert result.stdout.strip()


def test_lookup_input_file(recorded, tmp_path):
    input_file = tmp_path / "journals.txt"
    input_file.write_text("Ecology\n\n  Oikos  \n", encoding="utf-8")

    result = runner.invoke(
        cli_main.app,
        ["lookup", "Nature", "--input", str(input_file), "--format", "json"],
    )

    assert result.exit_code == 0
    assert recorded["journals"] == ["Nature", "Ecology", "Oikos"]


def test_lookup_output_file(recorded, tmp_path):
    output = tmp_path / "out.json"

    result = runner.invoke(
        cli_main.app,
        ["lookup", "Oikos", "--format", "json", "--output", str(output)],
    )

    assert result.exit_code == 0
    assert json.loads(output.read_text(encoding="utf-8"))[0]["journal"] == "Oikos"


def test_lookup_without_names(recorded):
    result = runner.invoke(cli_main.app, ["lookup"])

    assert result.exit_code == 1
    assert "Provide one or more journal names" in result.output
    assert "journals" not in recorded


def test_lookup_missing_input_file(recorded, tmp_path):
    result = runner.invoke(
        cli_main.app, ["lookup", "--input", str(tmp_path / "missing.txt")]
    )

    assert result.exit_code == 1
    assert "Cannot read input file" in result.output


@pytest.mark.parametrize(
    ("error", "label"),
    [
        (ConfigurationError("Be polite", config_key="email"), "Configuration Error"),
        (NetworkError("Network error: down", url="https://api.openalex.org"), "Network Error"),
    ],
)
def test_lookup_errors(monkeypatch, error, label):
    def failing_get_journals_info(journals, email=None, **kwargs):
        raise error

    monkeypatch.setattr(cli_main, "get_journals_info", failing_get_journals_info)

    result = runner.invoke(cli_main.app, ["lookup", "Oikos"])

    assert result.exit_code == 1
    assert label in result.output
