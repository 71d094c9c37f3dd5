"""league-table – CLI-Tool fuer Tabelle, Spielplan und Statistiken einer Spielrunde."""

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from league import Mode, SingleResult
from league.orphans import find_orphans, remap_player
from league.reporter import (
    print_fixtures,
    print_player,
    print_standings,
    write_csv_report,
    write_html_report,
)
from league.session import LeagueSession, make_doubles_result
from league.store import load_session, save_session
from league.validation import normalize_name


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='Tabelle, Spielplan und Statistiken fuer 1v1- und 2v2-Spielrunden.',
        prog='league_table.py',
    )
    parser.add_argument(
        '--state', type=Path, default=Path('league.json'),
        help='Pfad zur JSON-Datei mit Spielern und Ergebnissen (Standard: league.json)',
    )
    parser.add_argument(
        '--init', nargs='+', metavar='NAME',
        help='Neue Spielrunde mit diesen Spielern anlegen',
    )
    parser.add_argument(
        '--mode', choices=[m.value for m in Mode],
        help='Spielmodus umstellen (1v1 oder 2v2)',
    )
    parser.add_argument(
        '--add', nargs=4, metavar=('HOME', 'AWAY', 'HOME_GOALS', 'AWAY_GOALS'),
        help='1v1-Ergebnis eintragen',
    )
    parser.add_argument(
        '--add-doubles', nargs=6, metavar=('A1', 'A2', 'B1', 'B2', 'A_GOALS', 'B_GOALS'),
        help='2v2-Ergebnis eintragen',
    )
    parser.add_argument(
        '--note', help='Notiz zum eingetragenen Ergebnis',
    )
    parser.add_argument(
        '--delete', type=int, metavar='INDEX',
        help='Ergebnis mit diesem Index (ab 1) loeschen',
    )
    parser.add_argument(
        '--rename', nargs=2, metavar=('OLD', 'NEW'),
        help='Spieler umbenennen',
    )
    parser.add_argument(
        '--remap', action='store_true',
        help='Beim Umbenennen auch die Ergebnisse anpassen',
    )
    parser.add_argument(
        '--player', metavar='NAME',
        help='Statistik und Spielhistorie eines Spielers ausgeben',
    )
    parser.add_argument(
        '--fixtures', action='store_true',
        help='Spielplan mit Status ausgeben',
    )
    parser.add_argument(
        '--rounds', type=int, default=1,
        help='Anzahl Runden bei 2v2 mit genau 4 Spielern (Standard: 1)',
    )
    parser.add_argument(
        '--orphans', action='store_true',
        help='Ergebnisse mit unbekannten Spielern auflisten',
    )
    parser.add_argument(
        '--output', type=Path,
        help='Pfad fuer den Tabellen-Report (CSV)',
    )
    parser.add_argument(
        '--html', action='store_true',
        help='Zusaetzlich einen HTML-Report erzeugen',
    )
    return parser


def _parse_goals(parser: argparse.ArgumentParser, *values: str) -> list[int]:
    try:
        return [int(v) for v in values]
    except ValueError:
        parser.error(f"Ungueltiger Spielstand: {' '.join(values)}")


def apply_mutations(
    parser: argparse.ArgumentParser,
    args: argparse.Namespace,
    session: LeagueSession,
) -> tuple[LeagueSession, bool]:
    """Apply the mutating options; returns the new session and a changed flag."""
    changed = False
    try:
        if args.mode:
            session = session.set_mode(Mode(args.mode))
            changed = True

        if args.rename:
            old, new = args.rename
            session = session.rename_player(old, new)
            if args.remap:
                remapped = remap_player(list(session.results), old, normalize_name(new))
                session = replace(session, results=tuple(remapped))
            changed = True

        if args.add:
            home, away = args.add[0], args.add[1]
            home_goals, away_goals = _parse_goals(parser, *args.add[2:])
            session = session.add_result(SingleResult(
                home=home, away=away,
                home_goals=home_goals, away_goals=away_goals,
                note=args.note,
            ))
            changed = True

        if args.add_doubles:
            a1, a2, b1, b2 = args.add_doubles[:4]
            a_goals, b_goals = _parse_goals(parser, *args.add_doubles[4:])
            session = session.add_result(make_doubles_result(
                list(session.roster), (a1, a2), (b1, b2), a_goals, b_goals, args.note,
            ))
            changed = True

        if args.delete is not None:
            session = session.delete_result(args.delete - 1)
            changed = True
    except (ValueError, IndexError) as exc:
        parser.error(str(exc))

    return session, changed


def main() -> None:
    """Main entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    parser = build_parser()
    args = parser.parse_args()

    if args.rounds < 1:
        parser.error('--rounds muss mindestens 1 sein.')

    if args.init:
        session = LeagueSession(roster=())
        try:
            for name in args.init:
                session = session.add_player(name)
        except ValueError as exc:
            parser.error(str(exc))
        save_session(session, args.state)
    else:
        try:
            session = load_session(args.state)
        except ValueError as exc:
            parser.error(str(exc))

    session, changed = apply_mutations(parser, args, session)
    if changed:
        save_session(session, args.state)

    rows = session.standings()
    title = f'{args.state.stem} ({session.mode.value})'
    print_standings(rows, title)

    statuses = session.fixture_status(args.rounds) if args.fixtures else None
    if statuses is not None:
        print_fixtures(statuses)

    if args.player:
        if args.player not in session.roster:
            logging.warning("Spieler %s ist nicht im Kader.", args.player)
        print_player(session.stats_for(args.player))

    if args.orphans:
        orphans = find_orphans(list(session.roster), list(session.results), session.mode)
        if not orphans:
            logging.info("Keine verwaisten Ergebnisse.")
        for orphan in orphans:
            hint = f" (meinten Sie {orphan.suggestion}?)" if orphan.suggestion else ''
            logging.warning("Ergebnis %d: unbekannter Spieler %s%s",
                            orphan.index + 1, orphan.name, hint)

    if args.output:
        write_csv_report(rows, args.output)
        if args.html:
            write_html_report(
                rows, args.output.with_suffix('.html'), title,
                fixtures=statuses, history=list(session.results),
            )


if __name__ == '__main__':
    main()
