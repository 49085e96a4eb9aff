"""
Test suite for the batch ingestion command.

Runs the typer command against a file-backed SQLite database with a
deterministic embeddings client.

System role: Verification of batch job exit codes and summary output
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from knowledge_rag.configs import Settings
from knowledge_rag.configs.database import DatabaseSettings
from knowledge_rag.configs.embedding import EmbeddingSettings
from knowledge_rag.configs.ingestion import IngestionSettings
from knowledge_rag.scripts import ingest_knowledge_base as cli

runner = CliRunner()

BODY = (
    "## Overview\n"
    "Launch email campaigns to a warm audience before the public launch date."
)


@pytest.fixture
def cli_settings(
    tmp_path: Path,
    docs_dir: Path,
    embedding_dimensions: int,
    monkeypatch: pytest.MonkeyPatch,
) -> Settings:
    """Settings pointing at a temporary database and knowledge directory."""
    monkeypatch.delenv("EMBEDDING_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    settings = Settings(
        _env_file=None,
        database=DatabaseSettings(_env_file=None, url=f"sqlite+aiosqlite:///{tmp_path / 'kb.db'}"),
        embedding=EmbeddingSettings(_env_file=None, dimensions=embedding_dimensions),
        ingestion=IngestionSettings(
            _env_file=None,
            docs_dir=str(docs_dir),
            rate_limit_interval_seconds=0.0,
        ),
    )
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return settings


@pytest.fixture
def use_client(monkeypatch: pytest.MonkeyPatch, make_embeddings):
    """Replace the provider client factory with a deterministic client."""

    def _use(fail_on: tuple[str, ...] = ()):
        client = make_embeddings(fail_on=fail_on)
        monkeypatch.setattr(cli, "build_embeddings_client", lambda settings: client)
        return client

    return _use


class TestIngestCommand:
    """Test suite for the kb-ingest command."""

    def test_should_exit_zero_when_every_document_succeeds(
        self, cli_settings, use_client, docs_dir, markdown_writer
    ) -> None:
        # Arrange
        client = use_client()
        markdown_writer(docs_dir, "launch.md", "Launch Plan", ["launch"], BODY)
        markdown_writer(docs_dir, "email.md", "Email Guide", ["email"], BODY)

        # Act
        result = runner.invoke(cli.app, [])

        # Assert
        assert result.exit_code == 0, result.output
        assert "Successful: 2" in result.output
        assert "Failed: 0" in result.output
        assert "Knowledge base is ready for RAG queries." in result.output
        assert client.calls

    def test_should_exit_one_when_a_document_fails(
        self, cli_settings, use_client, docs_dir, markdown_writer
    ) -> None:
        use_client(fail_on=("FAILME",))
        markdown_writer(docs_dir, "a_good.md", "Good", ["launch"], BODY)
        markdown_writer(docs_dir, "b_bad.md", "Bad", ["launch"], BODY + "\nFAILME")

        result = runner.invoke(cli.app, [])

        assert result.exit_code == 1
        assert "Successful: 1" in result.output
        assert "Failed: 1" in result.output
        assert "b_bad.md" in result.output
        assert "ready for RAG queries" not in result.output

    def test_should_accept_docs_dir_option(
        self, cli_settings, use_client, tmp_path, markdown_writer
    ) -> None:
        other = tmp_path / "other"
        other.mkdir()
        markdown_writer(other, "refund.md", "Refund Policy", ["refund"], BODY)
        use_client()

        result = runner.invoke(cli.app, ["--docs-dir", str(other)])

        assert result.exit_code == 0, result.output
        assert "Total: 1" in result.output

    def test_should_exit_two_when_directory_is_missing(
        self, cli_settings, use_client, tmp_path
    ) -> None:
        use_client()

        result = runner.invoke(cli.app, ["--docs-dir", str(tmp_path / "missing")])

        assert result.exit_code == cli.CONFIG_ERROR_EXIT_CODE
        assert "Configuration error" in result.output

    def test_should_exit_two_without_provider_credential(self, cli_settings, docs_dir, markdown_writer) -> None:
        """Test the real client factory rejects a missing API key."""
        markdown_writer(docs_dir, "launch.md", "Launch Plan", ["launch"], BODY)

        result = runner.invoke(cli.app, [])

        assert result.exit_code == cli.CONFIG_ERROR_EXIT_CODE
        assert "API key" in result.output
