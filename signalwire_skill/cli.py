from __future__ import annotations

import json
import sys
from pathlib import Path

import typer

from .app import Skill, load_skill
from .config import Settings
from .content import load_bundle
from .errors import ContentError, DocumentNotFound, UnknownCategory
from .logging import configure_logging
from .models import Category

app = typer.Typer(help="SignalWire agents skill bundle utility")

EXIT_NO_MATCH = 1
EXIT_LOOKUP = 2


@app.callback()
def main(
    log_level: str | None = typer.Option(None, help="Log level (defaults to $LOG_LEVEL)"),
) -> None:
    configure_logging(log_level.upper() if log_level else None)


def _load(root: Path | None, **overrides: object) -> Skill:
    if root is not None:
        overrides["content_root"] = root
    try:
        return load_skill(Settings(**overrides))
    except ContentError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(EXIT_LOOKUP) from exc


def _read_text(text: str) -> str:
    return sys.stdin.read() if text == "-" else text


@app.command()
def match(
    text: str = typer.Argument(..., help="Request or code context; '-' reads stdin"),
    root: Path | None = typer.Option(None, help="Bundle directory"),
    min_confidence: float | None = typer.Option(None, help="Minimum confidence to activate"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object"),
) -> None:
    """Decide whether the skill is relevant to TEXT."""
    overrides: dict[str, object] = {}
    if min_confidence is not None:
        overrides["min_confidence"] = min_confidence
    skill = _load(root, **overrides)
    activation = skill.activate(_read_text(text))
    if as_json:
        typer.echo(json.dumps(activation.to_dict()))
    elif activation.relevant:
        terms = ", ".join(activation.matched)
        typer.echo(f"relevant (confidence {activation.confidence:.2f}): {terms}")
    else:
        typer.echo("not relevant")
    if not activation.relevant:
        raise typer.Exit(EXIT_NO_MATCH)


@app.command()
def show(
    name: str = typer.Argument(..., help="Document name, e.g. reference/agent-base"),
    root: Path | None = typer.Option(None, help="Bundle directory"),
) -> None:
    """Print the body of a document."""
    skill = _load(root)
    try:
        typer.echo(skill.store.get(name))
    except DocumentNotFound as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(EXIT_LOOKUP) from exc


@app.command("list")
def list_documents(
    category: str | None = typer.Option(None, help="Only documents of this category"),
    root: Path | None = typer.Option(None, help="Bundle directory"),
) -> None:
    """Print document names."""
    skill = _load(root)
    try:
        names = skill.store.list(category) if category else skill.store.names()
    except UnknownCategory as exc:
        choices = ", ".join(c.value for c in Category)
        typer.echo(f"error: {exc} (expected one of: {choices})", err=True)
        raise typer.Exit(EXIT_LOOKUP) from exc
    for name in names:
        typer.echo(name)


@app.command()
def route(
    text: str = typer.Argument(..., help="Request or code context; '-' reads stdin"),
    root: Path | None = typer.Option(None, help="Bundle directory"),
    limit: int | None = typer.Option(None, min=1, help="Maximum documents to surface"),
    render: bool = typer.Option(False, help="Print document bodies instead of names"),
) -> None:
    """Print the documents to surface for TEXT."""
    overrides: dict[str, object] = {}
    if limit is not None:
        overrides["max_documents"] = limit
    skill = _load(root, **overrides)
    routed = skill.route(_read_text(text))
    if not routed.activation.relevant:
        typer.echo("not relevant")
        raise typer.Exit(EXIT_NO_MATCH)
    if render:
        typer.echo(routed.render())
    else:
        for name in routed.names:
            typer.echo(name)


@app.command()
def check(root: Path | None = typer.Option(None, help="Bundle directory")) -> None:
    """Validate a bundle and print per-category counts."""
    try:
        bundle = load_bundle(root)
    except ContentError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(EXIT_LOOKUP) from exc

    problems: list[str] = []
    if not len(bundle.metadata.rule):
        problems.append("SKILL.md declares no triggers")
    if not bundle.metadata.activation:
        problems.append("SKILL.md has no activation description")
    problems.extend(f"skipped {path}: {reason}" for path, reason in bundle.skipped)

    counts = {c: 0 for c in Category}
    for doc in bundle.documents:
        counts[doc.category] += 1
    typer.echo(f"{bundle.metadata.name}: {len(bundle.documents)} documents")
    for category, count in counts.items():
        typer.echo(f"  {category.value}: {count}")

    for problem in problems:
        typer.echo(f"problem: {problem}", err=True)
    if problems:
        raise typer.Exit(1)
    typer.echo("ok")


if __name__ == "__main__":  # pragma: no cover
    app()
