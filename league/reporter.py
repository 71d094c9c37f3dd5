"""Report generation for standings (CSV, HTML, summary)."""

import csv
import logging
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from league import (
    DoublesResult,
    Fixture,
    PlayerStats,
    Reconciliation,
    Result,
    SingleFixture,
    SingleResult,
    StandingsRow,
)

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / 'templates'

CSV_COLUMNS = [
    'Rank',
    'Player',
    'Played',
    'Won',
    'Drawn',
    'Lost',
    'GoalsFor',
    'GoalsAgainst',
    'GoalDiff',
    'Points',
]


def _row_to_dict(rank: int, row: StandingsRow) -> dict:
    """Convert a StandingsRow to a flat dict for CSV/HTML output."""
    return {
        'Rank': str(rank),
        'Player': row.name,
        'Played': str(row.played),
        'Won': str(row.won),
        'Drawn': str(row.drawn),
        'Lost': str(row.lost),
        'GoalsFor': str(row.goals_for),
        'GoalsAgainst': str(row.goals_against),
        'GoalDiff': f'{row.goal_difference:+d}',
        'Points': str(row.points),
    }


def format_fixture(fixture: Fixture) -> str:
    """One-line description of a fixture."""
    if isinstance(fixture, SingleFixture):
        return f'{fixture.home} vs {fixture.away}'
    text = f"{' & '.join(fixture.team_a)} vs {' & '.join(fixture.team_b)}"
    if fixture.sitting:
        text += f" [Pause: {', '.join(fixture.sitting)}]"
    return text


def format_result(result: Result) -> str:
    """One-line description of a recorded result."""
    if isinstance(result, SingleResult):
        text = f'{result.home} {result.home_goals} - {result.away_goals} {result.away}'
    elif isinstance(result, DoublesResult):
        text = (
            f"{' & '.join(result.team_a)} {result.team_a_goals} - "
            f"{result.team_b_goals} {' & '.join(result.team_b)}"
        )
        if result.sitting:
            text += f" [Pause: {', '.join(result.sitting)}]"
    else:
        raise TypeError(f"Unbekannter Ergebnistyp: {type(result).__name__}")
    if result.note:
        text += f' ({result.note})'
    return text


def write_csv_report(rows: list[StandingsRow], output_path: Path) -> None:
    """Write the standings table as a CSV report.

    Uses UTF-8 with BOM (utf-8-sig) and semicolon delimiter for
    compatibility with German Excel.

    Args:
        rows: Ranked standings rows.
        output_path: Path for the output CSV file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS, delimiter=';')
        writer.writeheader()
        for rank, row in enumerate(rows, start=1):
            writer.writerow(_row_to_dict(rank, row))

    log.info("CSV-Report geschrieben: %s (%d Zeilen)", output_path, len(rows))


def write_html_report(
    rows: list[StandingsRow],
    output_path: Path,
    title: str = '',
    fixtures: Optional[list[Reconciliation]] = None,
    history: Optional[list[Result]] = None,
) -> None:
    """Write the standings table as an HTML report using Jinja2.

    Args:
        rows: Ranked standings rows.
        output_path: Path for the output HTML file.
        title: Report title.
        fixtures: Optional fixture statuses to list below the table.
        history: Optional results to list as match history.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template('standings.html')

    fixture_rows = [
        {
            'fixture': format_fixture(status.fixture),
            'completed': status.completed,
            'result': format_result(status.matched_result) if status.matched_result else '',
        }
        for status in fixtures or []
    ]

    html = template.render(
        title=title,
        rows=[_row_to_dict(rank, row) for rank, row in enumerate(rows, start=1)],
        columns=CSV_COLUMNS,
        fixtures=fixture_rows,
        history=[format_result(r) for r in history or []],
    )

    output_path.write_text(html, encoding='utf-8')
    log.info("HTML-Report geschrieben: %s", output_path)


def print_standings(rows: list[StandingsRow], title: str = '') -> None:
    """Print the standings table to stdout."""
    print(f"\n=== Tabelle: {title} ===")
    print(f"{'#':>2}  {'Spieler':<20} {'Sp':>3} {'S':>3} {'U':>3} {'N':>3} "
          f"{'Tore':>7} {'Diff':>5} {'Pkt':>4}")
    for rank, row in enumerate(rows, start=1):
        goals = f'{row.goals_for}:{row.goals_against}'
        print(f"{rank:>2}  {row.name:<20} {row.played:>3} {row.won:>3} "
              f"{row.drawn:>3} {row.lost:>3} {goals:>7} "
              f"{row.goal_difference:>+5d} {row.points:>4}")
    print()


def print_fixtures(statuses: list[Reconciliation]) -> None:
    """Print fixtures with their completion status to stdout."""
    done = sum(1 for s in statuses if s.completed)
    print(f"\n=== Spielplan: {done}/{len(statuses)} gespielt ===")
    for num, status in enumerate(statuses, start=1):
        line = f"{num:>3}. {format_fixture(status.fixture)}"
        if status.completed:
            line += f"  -> {format_result(status.matched_result)}"
            if status.times_played > 1:
                line += f" (x{status.times_played})"
        else:
            line += "  -> offen"
        print(line)
    print()


def print_player(stats: PlayerStats) -> None:
    """Print a player's aggregate and match history to stdout."""
    row = stats.row
    print(f"\n=== Spieler: {row.name} ===")
    print(f"Spiele:        {row.played:>5}")
    print(f"Siege:         {row.won:>5}")
    print(f"Unentschieden: {row.drawn:>5}")
    print(f"Niederlagen:   {row.lost:>5}")
    print(f"Tore:          {row.goals_for:>2}:{row.goals_against:<2}")
    print(f"Punkte:        {row.points:>5}")
    print("---")
    for result in stats.history:
        print(f"  {format_result(result)}")
    print()
