import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.markup import escape

from codeindex.code_index import CodeIndex
from codeindex.exceptions import CodeIndexError
from codeindex.logging_config import setup_logging
from codeindex.scanner import extract_elements, index_project
from codeindex.scanner.config import LANGUAGE_BY_SUFFIX
from codeindex.schemas import SearchResult
from codeindex.semantic import create_embedding_generator

app = typer.Typer(help="Hybrid keyword + semantic search over a codebase.")
console = Console()


class SearchMode(str, Enum):
    hybrid = "hybrid"
    keyword = "keyword"
    semantic = "semantic"


class EmbedderKind(str, Enum):
    hashing = "hashing"
    sentence_transformers = "sentence-transformers"


@app.callback()
def global_options(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show log output on stderr."
    ),
):
    """
    codeindex: locate functions, classes, interfaces and comments by keyword
    and by similarity. The index is built in memory on every invocation.
    """
    setup_logging(level="DEBUG" if verbose else "INFO", suppress_console=not verbose, force=True)


def _build_index(
    directory: Path,
    ext: Optional[List[str]],
    no_gitignore: bool,
    embedder: EmbedderKind = EmbedderKind.hashing,
) -> CodeIndex:
    index = CodeIndex(embedder=create_embedding_generator(embedder.value))
    index_project(index, directory, extensions=ext, respect_gitignore=not no_gitignore)
    return index


def _print_results(results: List[SearchResult], title: str) -> None:
    table = Table(title=title)
    table.add_column("Rank", justify="right", style="magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", style="green")
    table.add_column("File", style="blue")
    table.add_column("Relevance", justify="right")
    table.add_column("Highlight")

    for rank, result in enumerate(results, start=1):
        table.add_row(
            str(rank),
            escape(result.name),
            result.type,
            escape(result.file_path),
            f"{result.relevance:.3f}",
            escape(result.highlights[0][:60]) if result.highlights else "",
        )
    console.print(table)


@app.command()
def search(
    directory: Path = typer.Argument(
        ..., help="Project directory to index.", exists=True, file_okay=False, readable=True
    ),
    query: str = typer.Argument(..., help="Search query."),
    mode: SearchMode = typer.Option(SearchMode.hybrid, "--mode", "-m", help="Search strategy."),
    limit: int = typer.Option(5, "--limit", "-n", help="Maximum number of results."),
    keyword_weight: float = typer.Option(0.4, "--keyword-weight", help="Keyword weight for hybrid mode."),
    semantic_weight: float = typer.Option(0.6, "--semantic-weight", help="Semantic weight for hybrid mode."),
    ext: Optional[List[str]] = typer.Option(
        None, "--ext", help="File extensions to include (e.g., .py, .ts). Can be used multiple times."
    ),
    no_gitignore: bool = typer.Option(False, "--no-gitignore", help="Do not respect .gitignore files."),
    embedder: EmbedderKind = typer.Option(
        EmbedderKind.hashing, "--embedder", help="Embedding generator for semantic and hybrid search."
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON for agents."),
):
    """
    Index a directory and search it.
    """
    try:
        index = _build_index(directory, ext, no_gitignore, embedder)
        if mode == SearchMode.keyword:
            results = index.search_by_keyword(query, limit)
        elif mode == SearchMode.semantic:
            results = index.search_by_embedding(query, limit)
        else:
            results = index.search(
                query,
                keyword_weight=keyword_weight,
                semantic_weight=semantic_weight,
                limit=limit,
            )
    except CodeIndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(json.dumps([r.model_dump() for r in results], indent=2))
        return

    if not results:
        console.print(f"No results for '{escape(query)}'.")
        return
    _print_results(results, f"{mode.value.capitalize()} results for '{escape(query)}'")


@app.command()
def stats(
    directory: Path = typer.Argument(
        ..., help="Project directory to index.", exists=True, file_okay=False, readable=True
    ),
    ext: Optional[List[str]] = typer.Option(None, "--ext", help="File extensions to include."),
    no_gitignore: bool = typer.Option(False, "--no-gitignore", help="Do not respect .gitignore files."),
    json_output: bool = typer.Option(False, "--json", help="Output statistics as JSON."),
):
    """
    Index a directory and show aggregate index statistics.
    """
    index_stats = _build_index(directory, ext, no_gitignore).get_stats()

    if json_output:
        typer.echo(json.dumps(index_stats.model_dump(), indent=2))
        return

    table = Table(title=f"Index Statistics for '{escape(str(directory))}'")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="magenta")
    table.add_row("Elements", str(index_stats.total_embeddings))
    table.add_row("Keywords", str(index_stats.total_keywords))
    table.add_row("Files", str(index_stats.files_indexed))
    for element_type, count in sorted(index_stats.element_types.items()):
        table.add_row(f"  {element_type}", str(count))
    console.print(table)


@app.command()
def elements(
    file: Path = typer.Argument(..., help="Source file to inspect.", exists=True, dir_okay=False, readable=True),
    json_output: bool = typer.Option(False, "--json", help="Output elements as JSON."),
):
    """
    Show the elements extracted from a single source file.
    """
    content = file.read_text(encoding="utf-8", errors="replace")
    specs = extract_elements(content, LANGUAGE_BY_SUFFIX.get(file.suffix))

    if json_output:
        typer.echo(json.dumps([s.model_dump() for s in specs], indent=2))
        return

    table = Table(title=f"Elements in '{escape(str(file))}'")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Type", style="green")
    table.add_column("Lines", justify="right", style="magenta")
    for spec in specs:
        table.add_row(escape(spec.name), spec.element_type, str(spec.content.count("\n") + 1))
    console.print(table)


if __name__ == "__main__":
    app()
