"""CLI tests for the codeindex command."""

import json

import pytest
from typer.testing import CliRunner

from codeindex.main import app

pytestmark = pytest.mark.integration

runner = CliRunner()


def test_search_json(temp_project):
    result = runner.invoke(app, ["search", str(temp_project), "password", "--mode", "keyword", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert {item["name"] for item in payload} == {"AuthService", "Credentials"}
    assert all(item["relevance"] == 1.0 for item in payload)


def test_hybrid_search(temp_project):
    result = runner.invoke(app, ["search", str(temp_project), "multiply numbers", "--limit", "2", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert len(payload) == 2
    assert any(item["name"].startswith("Calculator") for item in payload)


def test_search_table_output(temp_project):
    result = runner.invoke(app, ["search", str(temp_project), "password", "--mode", "keyword"])

    assert result.exit_code == 0
    assert "Keyword results" in result.stdout


def test_search_rejects_negative_weights(temp_project):
    result = runner.invoke(app, ["search", str(temp_project), "password", "--keyword-weight", "-1"])
    assert result.exit_code == 1


def test_search_no_results(temp_project):
    result = runner.invoke(app, ["search", str(temp_project), "quantum", "--mode", "keyword"])
    assert result.exit_code == 0
    assert "No results" in result.stdout


def test_stats_json(temp_project):
    result = runner.invoke(app, ["stats", str(temp_project), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["files_indexed"] == 2
    assert payload["total_embeddings"] == 6
    assert payload["element_types"] == {"comment": 1, "class": 2, "interface": 1, "function": 2}


def test_elements_json(temp_project):
    result = runner.invoke(app, ["elements", str(temp_project / "src" / "math.py"), "--json"])

    assert result.exit_code == 0
    names = [item["name"] for item in json.loads(result.stdout)]
    assert names == ["add", "Calculator", "Calculator.multiply"]


def test_search_with_sentence_transformers_embedder(temp_project, stub_sentence_model):
    result = runner.invoke(
        app,
        ["search", str(temp_project), "multiply numbers", "--mode", "semantic",
         "--embedder", "sentence-transformers", "--json"],
    )

    assert result.exit_code == 0
    assert len(json.loads(result.stdout)) == 5
    assert stub_sentence_model["all-MiniLM-L6-v2"].encoded
