#!/usr/bin/env python3
"""
CLI for Gamezy fantasy cricket
"""
import json
import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from app.database import init_db, get_session
from app.engine.scoring import ScoringEngine, PlayerMatchStats, PlayerRole, format_points
from app.generators.seed_generator import SeedGenerator
from app.models.player import PlayerType
from app.services.match_lookup import MatchSourceLookup
from app.services.points_service import PointsService
from app.validators.roster_validator import RosterValidator, RosterEntry

console = Console()


@click.group()
def cli():
    """Gamezy - Fantasy Cricket"""
    pass


@cli.command()
def init():
    """Initialize the database"""
    console.print("[yellow]Initializing database...[/yellow]")
    init_db()
    console.print("[green]Database initialized successfully![/green]")


@cli.command()
@click.option("--days", default=1, help="Days from now until the demo match")
def seed_demo(days: int):
    """Load two teams, their squads, a user, a match and its contests"""
    init_db()
    session = get_session()
    try:
        match = SeedGenerator.seed(session, match_in_days=days)
        console.print(f"[green]Demo data loaded. Match id: {match.match_id}[/green]")
    finally:
        session.close()


@cli.command()
@click.option("--runs", default=0)
@click.option("--fours", default=0)
@click.option("--sixes", default=0)
@click.option("--wickets", default=0)
@click.option("--maidens", default=0)
@click.option("--catches", default=0)
@click.option("--run-outs", default=0)
@click.option("--stumpings", default=0)
@click.option("--role", type=click.Choice([r.value for r in PlayerRole]), default=PlayerRole.NONE.value)
def score(runs, fours, sixes, wickets, maidens, catches, run_outs, stumpings, role):
    """Score a single stat line"""
    stats = PlayerMatchStats(
        runs=runs, fours=fours, sixes=sixes,
        wickets=wickets, maidens=maidens,
        catches=catches, run_outs=run_outs, stumpings=stumpings,
    )
    breakdown = ScoringEngine.breakdown(stats, PlayerRole(role))

    table = Table(title="Fantasy Points")
    table.add_column("Component", style="cyan")
    table.add_column("Points", justify="right")
    table.add_row("Batting", str(breakdown.batting))
    table.add_row("Bowling", str(breakdown.bowling))
    table.add_row("Fielding", str(breakdown.fielding))
    table.add_row("Base", str(breakdown.base))
    table.add_row("Multiplier", f"x{breakdown.multiplier}")
    table.add_row("[bold]Total[/bold]", f"[bold green]{format_points(breakdown.total)}[/bold green]")
    console.print(table)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def validate(path: str):
    """
    Validate a roster JSON file:
    {"team_a_id": ..., "team_b_id": ..., "players": [{"player_id", "origin_team_id",
    "player_type", "is_captain", "is_vice_captain"}, ...]}
    """
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)

    try:
        roster = [
            RosterEntry(
                player_id=str(p["player_id"]),
                origin_team_id=str(p["origin_team_id"]),
                player_type=PlayerType(p["player_type"]),
                is_captain=bool(p.get("is_captain", False)),
                is_vice_captain=bool(p.get("is_vice_captain", False)),
            )
            for p in data.get("players", [])
        ]
    except (KeyError, ValueError) as e:
        raise click.ClickException(f"Malformed roster file: {e}")

    result = RosterValidator.validate(roster, data.get("team_a_id"), data.get("team_b_id"))

    if result.valid:
        console.print(Panel("[bold green]Valid XI[/bold green]"))
    else:
        console.print(Panel(f"[bold red]Invalid XI:[/bold red] {result.message}"))

    table = Table(title="Composition")
    table.add_column("Group", style="magenta")
    table.add_column("Count", justify="right")
    for player_type, count in result.breakdown["types"].items():
        table.add_row(player_type, str(count))
    for team_id, count in result.breakdown["teams"].items():
        table.add_row(f"team {team_id}", str(count))
    console.print(table)

    if not result.valid:
        raise SystemExit(1)


@cli.command()
@click.argument("match_id")
def recompute(match_id: str):
    """Rescore stored performances and fantasy team totals for a match"""
    session = get_session()
    try:
        totals = PointsService(session).recompute(match_id)
    except LookupError as e:
        raise click.ClickException(str(e))
    finally:
        session.close()

    table = Table(title=f"Team totals for {match_id}")
    table.add_column("Fantasy team", style="cyan")
    table.add_column("Points", justify="right", style="green")
    for team_id, total in sorted(totals.items(), key=lambda x: -x[1]):
        table.add_row(team_id, format_points(total))
    console.print(table)


@cli.command()
def pending():
    """List matches waiting for scorecard updates with their provider ids"""
    from datetime import datetime
    from app.models.match import Match, MatchStatus

    lookup = MatchSourceLookup.from_settings()
    session = get_session()
    try:
        matches = session.query(Match).filter(
            Match.match_status.in_([MatchStatus.UPCOMING, MatchStatus.LIVE]),
            Match.match_date <= datetime.utcnow(),
        ).order_by(Match.match_date).all()

        if not matches:
            console.print("[yellow]No matches pending.[/yellow]")
            return

        table = Table(title="Pending matches")
        table.add_column("Match", style="cyan")
        table.add_column("Teams")
        table.add_column("Status", style="magenta")
        table.add_column("Provider id")
        for m in matches:
            table.add_row(
                m.match_id,
                f"{m.home_team_id} vs {m.away_team_id}",
                m.match_status.value,
                lookup.get(m.match_id) or "[red]unmapped[/red]",
            )
        console.print(table)
    finally:
        session.close()


if __name__ == "__main__":
    cli()
