"""CLI entry point for github-rest."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, TypeVar

import typer
from rich import print as rprint
from rich import print_json
from rich.table import Table

from github_rest.client import GitHub
from github_rest.domain.models import GitHubModel
from github_rest.domain.options import RepositoryListByUserOptions
from github_rest.domain.value_objects import RepoRef
from github_rest.infrastructure.pagination import scan
from github_rest.interface.error_handlers import cli_errors

app = typer.Typer(help="Query the GitHub REST API from the command line.")

T = TypeVar("T")


def _run(call: Callable[[GitHub], Awaitable[T]]) -> T:
    """Run *call* against a client built from the environment."""

    async def runner() -> T:
        async with GitHub.from_settings() as gh:
            return await call(gh)

    with cli_errors():
        return asyncio.run(runner())


def _dump(model: GitHubModel) -> None:
    data: Any = model.model_dump(mode="json", exclude_none=True)
    print_json(data=data)


@app.command()
def user(login: str = typer.Argument("", help="Login; omit for the authenticated user.")) -> None:
    """Show a user profile."""
    found, _ = _run(lambda gh: gh.users.get(login))
    _dump(found)


@app.command()
def repo(ref: str = typer.Argument(..., help="owner/repo or https://github.com/owner/repo")) -> None:
    """Show a repository."""
    with cli_errors():
        parsed = RepoRef.from_string(ref)
    found, _ = _run(lambda gh: gh.repositories.get(parsed.owner, parsed.repo))
    _dump(found)


@app.command()
def repos(
    login: str = typer.Argument(..., help="User whose public repositories to list."),
    limit: int = typer.Option(100, "--limit", "-n", min=1, help="Stop after this many."),
) -> None:
    """List a user's repositories, following pagination."""

    async def collect(gh: GitHub) -> list[str]:
        opts = RepositoryListByUserOptions(per_page=min(limit, 100))
        names: list[str] = []
        async for item in scan(lambda page: gh.repositories.list_by_user(login, opts.with_page(page))):
            names.append(item.full_name or item.name or "?")
            if len(names) >= limit:
                break
        return names

    for name in _run(collect):
        rprint(name)


@app.command("rate-limit")
def rate_limit() -> None:
    """Show the current rate limit of every category."""
    limits, _ = _run(lambda gh: gh.rate_limit.get())

    table = Table("category", "limit", "remaining", "reset")
    for category, rate in limits:
        if rate is None:
            continue
        reset = f"{rate.reset:%Y-%m-%d %H:%M:%S}" if rate.reset else "-"
        table.add_row(category, str(rate.limit), str(rate.remaining), reset)
    rprint(table)


@app.command()
def zen() -> None:
    """Print a line of GitHub zen."""
    text, _ = _run(lambda gh: gh.meta.zen())
    rprint(text)
