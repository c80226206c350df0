from rich.console import Console
from rich.table import Table

from sleeper_adp.domain.adp import GroupAggregation
from sleeper_adp.domain.comparison import ComparisonRow, MoversSummary
from sleeper_adp.domain.draft_pick import League
from sleeper_adp.domain.round_pick import PLACEHOLDER

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _fmt_adp(value: float | None) -> str:
    return f"{value:.2f}" if value is not None else PLACEHOLDER


def _fmt_delta(delta: float | None) -> str:
    if delta is None:
        return PLACEHOLDER
    if delta < 0:
        return f"[green]{delta:+.2f}[/green]"
    if delta > 0:
        return f"[red]{delta:+.2f}[/red]"
    return f"{delta:+.2f}"


def print_leagues(leagues: list[League]) -> None:
    if not leagues:
        console.print("No leagues found.")
        return
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("League ID")
    table.add_column("Name")
    table.add_column("Season")
    table.add_column("Teams", justify="right")
    for league in leagues:
        teams = str(league.total_rosters) if league.total_rosters is not None else ""
        table.add_row(league.league_id, league.name, league.season, teams)
    console.print(table)


def print_group_summary(label: str, group: GroupAggregation) -> None:
    used = sum(league.aggregation.picks_used for league in group.leagues)
    console.print(
        f"[bold]{label}[/bold]: {len(group.leagues)} leagues, "
        f"{group.meta.teams} teams x {group.meta.rounds} rounds, {used} picks"
    )
    if group.picks_skipped:
        console.print(f"  [yellow]Skipped {group.picks_skipped} picks with missing pick data[/yellow]")


def print_player_stats(group: GroupAggregation, limit: int | None = None) -> None:
    """Print the merged ADP table for one league group, earliest ADP first."""
    stats = list(group.players.values())
    if not stats:
        console.print("No picks found.")
        return
    if limit is not None:
        stats = stats[:limit]
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("ADP", justify="right")
    table.add_column("Rd.Pk", justify="right")
    table.add_column("Mode", justify="right")
    table.add_column("Mode Rd.Pk", justify="right")
    table.add_column("Drafted", justify="right")
    for i, stat in enumerate(stats, start=1):
        table.add_row(
            str(i),
            stat.name,
            stat.position,
            f"{stat.avg_overall_pick:.2f}",
            stat.avg_round_pick,
            str(stat.mode_overall_pick),
            stat.mode_round_pick,
            str(stat.count),
        )
    console.print(table)


def print_draftboard(group: GroupAggregation) -> None:
    """Print the board grid: one row per round, one column per draft slot.

    Each cell shows the most frequent player in that slot and how often.
    """
    if not group.cells:
        console.print("No picks found.")
        return
    teams = max(group.meta.teams, max(slot for _, slot in group.cells))
    rounds = max(group.meta.rounds, max(rnd for rnd, _ in group.cells))

    table = Table(show_edge=False, pad_edge=False, show_lines=True)
    table.add_column("Rd", justify="right")
    for slot in range(1, teams + 1):
        table.add_column(str(slot))
    for rnd in range(1, rounds + 1):
        row = [str(rnd)]
        for slot in range(1, teams + 1):
            cell = group.cells.get((rnd, slot))
            if cell is None or not cell.entries:
                row.append("")
                continue
            top = cell.entries[0]
            row.append(f"{top.name} ({top.position})\n{top.pct:.0%}")
        table.add_row(*row)
    console.print(table)


def print_comparison(rows: list[ComparisonRow], limit: int | None = None) -> None:
    if not rows:
        console.print("No players to compare.")
        return
    if limit is not None:
        rows = rows[:limit]
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Player")
    table.add_column("Pos")
    table.add_column("ADP A", justify="right")
    table.add_column("Rd.Pk A", justify="right")
    table.add_column("ADP B", justify="right")
    table.add_column("Rd.Pk B", justify="right")
    table.add_column("Delta", justify="right")
    for row in rows:
        table.add_row(
            row.name,
            row.position,
            _fmt_adp(row.adp_a),
            row.round_pick_a,
            _fmt_adp(row.adp_b),
            row.round_pick_b,
            _fmt_delta(row.delta),
        )
    console.print(table)


def print_movers(summary: MoversSummary) -> None:
    sections = [
        ("Risers (earlier in A)", summary.risers),
        ("Fallers (later in A)", summary.fallers),
        ("Only in A", summary.only_a),
        ("Only in B", summary.only_b),
    ]
    for title, rows in sections:
        console.print(f"[bold]{title}[/bold] ({len(rows)})")
        for row in rows:
            if row.delta is not None:
                detail = f"{row.round_pick_a} vs {row.round_pick_b} ({_fmt_delta(row.delta)})"
            else:
                detail = row.round_pick_a if row.adp_a is not None else row.round_pick_b
            console.print(f"  {row.name} ({row.position}) {detail}")
