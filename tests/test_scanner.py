"""Tests for element extraction and project indexing."""

from pathlib import Path

import pytest

from codeindex import CodeIndex
from codeindex.scanner import collect_elements, extract_elements, index_project, walk_sources
from codeindex.scanner.extractor import extract_block

pytestmark = pytest.mark.integration

TS_SOURCE = '''import { User } from "./user";

/**
 * Verifies user credentials.
 */
export async function login(email: string, password: string) {
    if (password.length === 0) {
        return null;
    }
    return { email };
}

export class AuthService {
    logout() {
        return true;
    }
}

export interface Session {
    token: string;
}
'''

PY_SOURCE = '''import os


def top_level(value):
    """Doc."""

    return value * 2


class Greeter:
    def greet(self, name):
        return f"Hello, {name}!"

    async def wave(self):
        pass
'''


class TestExtractor:
    def test_javascript_elements_in_source_order(self):
        specs = extract_elements(TS_SOURCE, "javascript")

        assert [(s.element_type, s.name) for s in specs] == [
            ("comment", "comment@3"),
            ("function", "login"),
            ("class", "AuthService"),
            ("interface", "Session"),
        ]

    def test_javascript_bodies_are_brace_matched(self):
        specs = {s.name: s for s in extract_elements(TS_SOURCE, "javascript")}

        assert specs["login"].content.startswith("export async function login")
        assert specs["login"].content.endswith("return { email };\n}")
        assert specs["AuthService"].content.endswith("return true;\n    }\n}")
        assert specs["Session"].content == "export interface Session {\n    token: string;\n}"

    def test_python_elements_are_qualified(self):
        specs = extract_elements(PY_SOURCE, "python")

        assert [(s.element_type, s.name) for s in specs] == [
            ("function", "top_level"),
            ("class", "Greeter"),
            ("function", "Greeter.greet"),
            ("function", "Greeter.wave"),
        ]
        top_level = specs[0].content
        assert top_level.startswith("def top_level(value):")
        assert top_level.endswith("return value * 2")

    def test_python_multiline_signature_keeps_body(self):
        source = (
            "def authenticate(\n"
            "    username,\n"
            "    password,\n"
            "):\n"
            "    token = issue_token(username, password)\n"
            "    return token\n"
            "\n"
            "\n"
            "def after():\n"
            "    pass\n"
        )
        specs = extract_elements(source, "python")

        assert [s.name for s in specs] == ["authenticate", "after"]
        assert specs[0].content.endswith("    return token")
        assert "issue_token" in specs[0].content
        assert "after" not in specs[0].content

    def test_python_one_line_definition(self):
        specs = extract_elements("def double(x): return x * 2\nvalue = double(2)\n", "python")
        assert specs[0].content == "def double(x): return x * 2"

    def test_unknown_language_or_empty_content(self):
        assert extract_elements(TS_SOURCE, None) == []
        assert extract_elements("", "python") == []

    def test_extract_block_without_braces(self):
        assert extract_block("function broken()", 0) == "function broken()"
        assert extract_block("function open() { {", 0) == "function open() { {"


class TestProjectIndexing:
    def test_walk_respects_ignore_rules_and_extensions(self, temp_project):
        paths = [p.as_posix() for p in walk_sources(temp_project)]
        assert paths == ["src/auth.ts", "src/math.py"]

    def test_walk_without_gitignore_includes_vendored(self, temp_project):
        paths = [p.as_posix() for p in walk_sources(temp_project, respect_gitignore=False)]
        assert "node_modules/lib/index.js" in paths

    def test_walk_honours_project_gitignore(self, temp_project):
        (temp_project / ".gitignore").write_text("src/math.py\n")
        assert [p.as_posix() for p in walk_sources(temp_project)] == ["src/auth.ts"]

    def test_walk_size_filter(self, temp_project):
        assert list(walk_sources(temp_project, max_bytes=10)) == []

    def test_collect_elements(self, temp_project):
        collected = collect_elements(temp_project)
        assert sorted(collected) == ["src/auth.ts", "src/math.py"]
        assert {s.name for s in collected["src/math.py"]} == {"add", "Calculator", "Calculator.multiply"}

    def test_index_project_and_incremental_pass(self, temp_project):
        index = CodeIndex()

        first = index_project(index, temp_project)
        assert sorted(first.reindexed) == ["src/auth.ts", "src/math.py"]
        assert [r.name for r in index.search_by_keyword("verifypassword")] == ["AuthService"]

        second = index_project(index, temp_project)
        assert sorted(second.skipped) == ["src/auth.ts", "src/math.py"]

        (temp_project / "src" / "auth.ts").write_text("export function logout() { return done; }\n")
        (temp_project / "src" / "math.py").unlink()
        third = index_project(index, temp_project)

        assert third.reindexed == ["src/auth.ts"]
        assert third.removed == ["src/math.py"]
        assert index.search_by_keyword("verifypassword") == []
        assert index.get_stats().files_indexed == 1
