import asyncio
from typing import Annotated

import typer

from sleeper_adp.cli._logging import configure_logging
from sleeper_adp.cli._output import (
    console,
    print_comparison,
    print_draftboard,
    print_error,
    print_group_summary,
    print_leagues,
    print_movers,
    print_player_stats,
)
from sleeper_adp.cli.factory import MATCH_MODES, build_compare_context
from sleeper_adp.config import AppSettings, create_config, load_settings
from sleeper_adp.domain.adp import GroupAggregation
from sleeper_adp.domain.comparison import ComparisonReport
from sleeper_adp.domain.draft_pick import League
from sleeper_adp.domain.errors import AdpError
from sleeper_adp.services.comparator import SORT_FIELDS, sort_rows, summarize_movers

app = typer.Typer(name="sleeper-adp", help="Sleeper ADP: aggregate and compare draft positions across leagues")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    config_path: Annotated[str, typer.Option("--config", help="Path to YAML config file")] = "config.yaml",
) -> None:
    """Sleeper ADP: aggregate and compare draft positions across leagues."""
    configure_logging(verbose=verbose)
    ctx.obj = load_settings(create_config(yaml_path=config_path))
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_TeamsOpt = Annotated[
    int | None, typer.Option("--teams", help="Team count for round.pick formatting (default: detected)")
]
_LimitOpt = Annotated[int | None, typer.Option("--limit", help="Show at most this many rows")]
_MatchOpt = Annotated[str, typer.Option("--match", help=f"Player matching: {', '.join(MATCH_MODES)}")]


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return load_settings()


def _check_match(match: str) -> None:
    if match not in MATCH_MODES:
        print_error(f"unknown match mode '{match}', expected one of {', '.join(MATCH_MODES)}")
        raise typer.Exit(code=1)


@app.command("leagues")
def leagues_cmd(
    ctx: typer.Context,
    username: Annotated[str, typer.Argument(help="Sleeper username")],
    season: Annotated[str | None, typer.Option("--season", help="NFL season (default: from config)")] = None,
) -> None:
    """List a Sleeper user's leagues for a season."""
    settings = _settings(ctx)

    async def _run() -> list[League]:
        async with build_compare_context(settings) as cc:
            return await cc.client.get_user_leagues(username, season or settings.season)

    try:
        leagues = asyncio.run(_run())
    except AdpError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_leagues(leagues)


@app.command("adp")
def adp_cmd(
    ctx: typer.Context,
    league_ids: Annotated[list[str], typer.Argument(help="League IDs to aggregate")],
    teams: _TeamsOpt = None,
    limit: _LimitOpt = None,
    match: _MatchOpt = "name",
) -> None:
    """Show merged ADP across one group of leagues."""
    _check_match(match)
    settings = _settings(ctx)

    async def _run() -> GroupAggregation:
        async with build_compare_context(settings, match=match) as cc:
            return await cc.service.aggregate_group(league_ids, teams=teams)

    try:
        group = asyncio.run(_run())
    except AdpError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_group_summary("Leagues", group)
    print_player_stats(group, limit=limit)


@app.command("board")
def board_cmd(
    ctx: typer.Context,
    league_ids: Annotated[list[str], typer.Argument(help="League IDs to aggregate")],
    teams: _TeamsOpt = None,
    match: _MatchOpt = "name",
) -> None:
    """Show the draft board grid with the most common player per cell."""
    _check_match(match)
    settings = _settings(ctx)

    async def _run() -> GroupAggregation:
        async with build_compare_context(settings, match=match) as cc:
            return await cc.service.aggregate_group(league_ids, teams=teams)

    try:
        group = asyncio.run(_run())
    except AdpError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_group_summary("Leagues", group)
    print_draftboard(group)


@app.command("compare")
def compare_cmd(
    ctx: typer.Context,
    side_a: Annotated[list[str], typer.Option("--a", help="League ID for Side A (repeatable)")],
    side_b: Annotated[list[str] | None, typer.Option("--b", help="League ID for Side B (repeatable)")] = None,
    teams: _TeamsOpt = None,
    sort: Annotated[str, typer.Option("--sort", help=f"Sort field: {', '.join(SORT_FIELDS)}")] = "abs_delta",
    descending: Annotated[bool, typer.Option("--desc/--asc", help="Sort direction")] = True,
    limit: _LimitOpt = None,
    movers: Annotated[bool, typer.Option("--movers", help="Group output into risers and fallers")] = False,
    match: _MatchOpt = "name",
) -> None:
    """Compare ADP between two groups of leagues.

    Delta is ADP(A) - ADP(B); a negative delta means the player went earlier in A.
    """
    _check_match(match)
    if sort not in SORT_FIELDS:
        print_error(f"unknown sort field '{sort}', expected one of {', '.join(SORT_FIELDS)}")
        raise typer.Exit(code=1)
    settings = _settings(ctx)

    async def _run() -> ComparisonReport:
        async with build_compare_context(settings, match=match) as cc:
            return await cc.service.compare(side_a, side_b, teams=teams)

    try:
        report = asyncio.run(_run())
    except AdpError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_group_summary("Side A", report.side_a)
    if report.side_b is not None:
        print_group_summary("Side B", report.side_b)
    console.print()

    if movers:
        print_movers(summarize_movers(report.rows, top=limit))
        return
    print_comparison(sort_rows(report.rows, sort, descending=descending), limit=limit)
