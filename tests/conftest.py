"""
Pytest configuration for the codeindex test suite.

Provides machine-mode logging (console output suppressed) and common
fixtures for indexes, sample corpora and temporary projects.
"""

import os

import pytest

from codeindex import CodeIndex, HashingEmbeddingGenerator
from codeindex.logging_config import setup_logging


AUTH_LOGIN = '''async login(email: string, password: string): Promise<Token> {
    // Handles the authentication flow for a user
    if (!email || !password) {
        throw new Error("Credentials required");
    }
    const token = await this.issueToken(email, password);
    return token;
}'''

USER_FIND = '''async findUser(email: string): Promise<User | undefined> {
    const users = new Map<string, User>();
    return users.get(email);
}'''


def pytest_configure(config):
    os.environ.setdefault("CODEINDEX_MACHINE_MODE", "1")


@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


@pytest.fixture
def code_index():
    return CodeIndex()


@pytest.fixture
def auth_index(code_index):
    """
    Index with AuthService.login (mentions password, token) and
    UserService.findUser (mentions email, map).
    """
    code_index.index("src/auth.ts", "function", "AuthService.login", AUTH_LOGIN)
    code_index.index("src/user.ts", "function", "UserService.findUser", USER_FIND)
    return code_index


@pytest.fixture
def temp_project(tmp_path):
    """
    Temporary project with TypeScript and Python sources plus ignored files.
    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "auth.ts").write_text('''/**
 * Authentication helpers.
 */
export class AuthService {
    async login(email: string, password: string) {
        return this.verifyPassword(email, password);
    }
}

export interface Credentials {
    email: string;
    password: string;
}
''')
    (src / "math.py").write_text('''def add(a, b):
    """Add two numbers."""
    return a + b


class Calculator:
    def multiply(self, a, b):
        return a * b
''')

    vendored = tmp_path / "node_modules" / "lib"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text("function vendoredPassword() { return 1; }\n")

    (tmp_path / "README.md").write_text("# not indexed\n")
    return tmp_path


class StubSentenceModel:
    """
    Stand-in for a SentenceTransformer: hashes text into a small vector and
    records every encode() call.
    """

    dimension = 16

    def __init__(self, model_name):
        self.model_name = model_name
        self.encoded = []
        self._hasher = HashingEmbeddingGenerator(dimension=self.dimension)

    def get_sentence_embedding_dimension(self):
        return self.dimension

    def encode(self, sentences, convert_to_numpy=True, normalize_embeddings=True):
        self.encoded.extend(sentences)
        return self._hasher.embed_texts(sentences)


@pytest.fixture
def stub_sentence_model(monkeypatch):
    """
    Patch the model loader so the sentence-transformers generator runs
    without downloading a model.
    """
    models = {}

    def fake_get_model(model_name="all-MiniLM-L6-v2"):
        if model_name not in models:
            models[model_name] = StubSentenceModel(model_name)
        return models[model_name]

    monkeypatch.setattr("codeindex.semantic.embeddings.get_model", fake_get_model)
    return models
