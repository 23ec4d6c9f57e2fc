"""Command-line interface for Kickoff.

Every subcommand loads the tournament snapshot given by ``--file``, applies
one operation and saves it back. Running without arguments (or with
``--interactive``) opens a shell that accepts the same subcommands.
"""

# Kickoff
# Copyright (C) 2025  Kickoff developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from kickoff import __version__
from kickoff.commentary import GeminiCommentator
from kickoff.constants import DEFAULT_KNOCKOUT_QUALIFIERS, DEFAULT_SAVE_FILE
from kickoff.exceptions import (
    FixtureNotFoundException,
    KickoffException,
    ParticipantNotFoundException,
)
from kickoff.models.enums import Stage, TournamentFormat
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.models.tournament.tournament import Tournament
from kickoff.storage import load_tournament, save_tournament
from kickoff.utils import set_log_level, setup_logger
from kickoff.utils.formatting import format_fixtures, format_standings, round_label

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their options
COMMANDS = {
    "new": {
        "description": "Create a tournament in setup",
        "options": {
            "--format": "league, knockout or hybrid (default: league)",
            "--double-leg": "Play league fixtures home and away",
            "--qualifiers": f"Hybrid: league finishers that advance (default: {DEFAULT_KNOCKOUT_QUALIFIERS})",
            "--force": "Overwrite an existing tournament file",
        },
    },
    "add-player": {"description": "Register a participant: NAME TEAM", "options": {}},
    "edit-player": {
        "description": "Rename a participant or change their team: PLAYER",
        "options": {"--name": "New display name", "--team": "New team"},
    },
    "remove-player": {"description": "Unregister a participant (setup only): PLAYER", "options": {}},
    "players": {"description": "List registered participants", "options": {}},
    "start": {"description": "Generate fixtures and start the tournament", "options": {}},
    "fixtures": {
        "description": "Show fixtures grouped by round",
        "options": {"--stage": "league or knockout (default: current stage)"},
    },
    "record": {
        "description": "Record a result: FIXTURE HOME_SCORE AWAY_SCORE",
        "options": {"--commentary": "Ask for AI commentary afterwards"},
    },
    "clear": {"description": "Reset a fixture to scheduled: FIXTURE", "options": {}},
    "add-fixture": {"description": "Add a fixture by hand: HOME AWAY", "options": {}},
    "standings": {"description": "Show the league table", "options": {}},
    "advance": {"description": "Hybrid: seed the league leaders into a knockout bracket", "options": {}},
    "next-round": {"description": "Draw the next knockout round from the winners", "options": {}},
    "finish": {"description": "Close the tournament", "options": {}},
    "commentary": {"description": "AI commentary on a played fixture: FIXTURE", "options": {}},
    "predict": {"description": "AI prediction for the title race", "options": {}},
}


def print_success(message: str) -> None:
    print(f"{Colors.OKGREEN}{message}{Colors.ENDC}")


def print_error(message: str) -> None:
    print(f"{Colors.FAIL}Error: {message}{Colors.ENDC}", file=sys.stderr)


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                        KICKOFF - CLI                          ║
║                                                               ║
║              [Leagues, brackets and everything in between]    ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # Support both "/command" and "command" formats
    completions = {}
    for cmd, info in COMMANDS.items():
        options_completer = (
            WordCompleter(list(info["options"].keys())) if info["options"] else None
        )
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = None
    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


# ========== Lookups ==========


def resolve_participant(tournament: Tournament, reference: str) -> Participant:
    """Find a participant by id or by (case-insensitive) name.

    Raises:
        ParticipantNotFoundException: If nothing or more than one participant matches
    """
    participant = tournament.state.get_participant(reference)
    if participant is not None:
        return participant

    matches = [
        p for p in tournament.participants if p.name.lower() == reference.strip().lower()
    ]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise ParticipantNotFoundException(
            f"'{reference}' matches {len(matches)} participants, use the id instead"
        )
    raise ParticipantNotFoundException(f"Unknown participant: {reference}")


def resolve_fixture(tournament: Tournament, reference: str) -> Fixture:
    """Find a fixture by id, or by an unambiguous prefix of its id.

    The ``fixture-`` prefix of generated ids may be left out.

    Raises:
        FixtureNotFoundException: If nothing or more than one fixture matches
    """
    fixture = tournament.get_fixture(reference)
    if fixture is not None:
        return fixture

    matches = [
        f
        for f in tournament.get_fixtures()
        if f.id.startswith(reference) or f.id.split("-", 1)[-1].startswith(reference)
    ]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise FixtureNotFoundException(
            f"'{reference}' matches {len(matches)} fixtures, type more of the id"
        )
    raise FixtureNotFoundException(f"Unknown fixture: {reference}")


def describe_fixture(tournament: Tournament, fixture: Fixture) -> str:
    home = tournament.get_participant(fixture.home_id).name
    away = tournament.get_participant(fixture.away_id).name
    score = (
        f"{fixture.home_score}-{fixture.away_score}" if fixture.is_played else "vs"
    )
    label = round_label(fixture.round, fixture.stage, fixture.is_manual)
    return f"{label}: {home} {score} {away}"


# ========== Commands ==========


def run_new_command(args: argparse.Namespace) -> int:
    """Create a fresh tournament file."""
    path = Path(args.file)
    if path.exists() and not args.force:
        print_error(f"{path} already exists, use --force to overwrite it")
        return 1

    tournament = Tournament(
        name=args.name,
        tournament_format=TournamentFormat(args.format.upper()),
        double_leg=args.double_leg,
        knockout_qualifiers=args.qualifiers,
    )
    save_tournament(tournament, path)
    print_success(
        f"Created {tournament.format.value.lower()} tournament '{tournament.name}' in {path}"
    )
    return 0


def run_add_player_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    participant = tournament.add_participant(args.name, args.team)
    save_tournament(tournament, args.file)
    print_success(f"Added {participant} [{participant.id}]")
    return 0


def run_edit_player_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    participant = resolve_participant(tournament, args.player)
    updated = tournament.update_participant(participant.id, name=args.name, team=args.team)
    save_tournament(tournament, args.file)
    print_success(f"Updated {updated} [{updated.id}]")
    return 0


def run_remove_player_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    participant = resolve_participant(tournament, args.player)
    tournament.remove_participant(participant.id)
    save_tournament(tournament, args.file)
    print_success(f"Removed {participant}")
    return 0


def run_players_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    participants = tournament.participants
    if not participants:
        print("No participants registered.")
        return 0

    for index, participant in enumerate(participants, 1):
        print(f"{index:>3}. {participant.name:<24} {participant.team:<20} [{participant.id}]")
    return 0


def run_start_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    fixtures = tournament.start()
    save_tournament(tournament, args.file)
    print_success(f"Tournament started with {len(fixtures)} fixtures")
    print(format_fixtures(tournament))
    return 0


def run_fixtures_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    stage = Stage(args.stage.upper()) if args.stage else None
    print(f"{Colors.BOLD}{tournament.name}{Colors.ENDC}")
    print(format_fixtures(tournament, stage))
    return 0


def run_record_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    fixture = resolve_fixture(tournament, args.fixture)
    updated = tournament.record_result(fixture.id, args.home_score, args.away_score)

    if args.commentary:
        text = tournament.annotate_fixture(updated.id, GeminiCommentator())
        print(f"{Colors.OKCYAN}{text}{Colors.ENDC}")

    save_tournament(tournament, args.file)
    print_success(f"Recorded {describe_fixture(tournament, updated)}")
    return 0


def run_clear_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    fixture = resolve_fixture(tournament, args.fixture)
    updated = tournament.clear_result(fixture.id)
    save_tournament(tournament, args.file)
    print_success(f"Cleared {describe_fixture(tournament, updated)}")
    return 0


def run_add_fixture_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    home = resolve_participant(tournament, args.home)
    away = resolve_participant(tournament, args.away)
    fixture = tournament.add_manual_fixture(home.id, away.id)
    save_tournament(tournament, args.file)
    print_success(f"Added {describe_fixture(tournament, fixture)} [{fixture.id}]")
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    print(f"{Colors.BOLD}{tournament.name}{Colors.ENDC}")
    print(format_standings(tournament.get_standings()))
    if tournament.winner is not None:
        print(f"\nChampion: {tournament.winner}")
    return 0


def run_advance_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    bracket = tournament.advance_to_knockout()
    save_tournament(tournament, args.file)
    print_success(f"Knockout stage drawn: {round_label(bracket[0].round, Stage.KNOCKOUT)}")
    print(format_fixtures(tournament, Stage.KNOCKOUT))
    return 0


def run_next_round_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    fixtures = tournament.advance_knockout_round()
    save_tournament(tournament, args.file)

    if not fixtures:
        print_success(f"Champion: {tournament.winner}")
        return 0

    print_success(f"Drew the {round_label(fixtures[0].round, Stage.KNOCKOUT)}")
    print(format_fixtures(tournament, Stage.KNOCKOUT))
    return 0


def run_finish_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    winner = tournament.finish()
    save_tournament(tournament, args.file)
    print_success(f"Tournament finished. Winner: {winner if winner else 'none'}")
    return 0


def run_commentary_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    fixture = resolve_fixture(tournament, args.fixture)
    text = tournament.annotate_fixture(fixture.id, GeminiCommentator())
    save_tournament(tournament, args.file)
    print(f"{describe_fixture(tournament, fixture)}\n{Colors.OKCYAN}{text}{Colors.ENDC}")
    return 0


def run_predict_command(args: argparse.Namespace) -> int:
    tournament = load_tournament(args.file)
    prediction = tournament.predict(GeminiCommentator())
    print(prediction if prediction else "No prediction available.")
    return 0


# ========== Parsers ==========


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="kickoff",
        description="Run head-to-head leagues, knockout brackets and hybrids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  kickoff

  # Set up a hybrid tournament
  kickoff new "Friday Cup" --format hybrid
  kickoff add-player Ana "Real Madrid"
  kickoff add-player Luis Barcelona
  kickoff start

  # Play it
  kickoff fixtures
  kickoff record 3f2a 2 1
  kickoff standings
  kickoff advance
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument(
        "--file",
        "-f",
        default=DEFAULT_SAVE_FILE,
        help=f"Tournament snapshot file (default: {DEFAULT_SAVE_FILE})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    new_parser = subparsers.add_parser("new", help=COMMANDS["new"]["description"])
    new_parser.add_argument("name", help="Tournament name")
    new_parser.add_argument(
        "--format",
        choices=[f.value.lower() for f in TournamentFormat],
        default=TournamentFormat.LEAGUE.value.lower(),
    )
    new_parser.add_argument("--double-leg", action="store_true")
    new_parser.add_argument("--qualifiers", type=int, default=DEFAULT_KNOCKOUT_QUALIFIERS)
    new_parser.add_argument("--force", action="store_true")
    new_parser.set_defaults(func=run_new_command)

    add_parser = subparsers.add_parser("add-player", help=COMMANDS["add-player"]["description"])
    add_parser.add_argument("name")
    add_parser.add_argument("team")
    add_parser.set_defaults(func=run_add_player_command)

    edit_parser = subparsers.add_parser("edit-player", help=COMMANDS["edit-player"]["description"])
    edit_parser.add_argument("player", help="Participant id or name")
    edit_parser.add_argument("--name")
    edit_parser.add_argument("--team")
    edit_parser.set_defaults(func=run_edit_player_command)

    remove_parser = subparsers.add_parser(
        "remove-player", help=COMMANDS["remove-player"]["description"]
    )
    remove_parser.add_argument("player", help="Participant id or name")
    remove_parser.set_defaults(func=run_remove_player_command)

    players_parser = subparsers.add_parser("players", help=COMMANDS["players"]["description"])
    players_parser.set_defaults(func=run_players_command)

    start_parser = subparsers.add_parser("start", help=COMMANDS["start"]["description"])
    start_parser.set_defaults(func=run_start_command)

    fixtures_parser = subparsers.add_parser("fixtures", help=COMMANDS["fixtures"]["description"])
    fixtures_parser.add_argument("--stage", choices=[s.value.lower() for s in Stage])
    fixtures_parser.set_defaults(func=run_fixtures_command)

    record_parser = subparsers.add_parser("record", help=COMMANDS["record"]["description"])
    record_parser.add_argument("fixture", help="Fixture id or id prefix")
    record_parser.add_argument("home_score")
    record_parser.add_argument("away_score")
    record_parser.add_argument("--commentary", action="store_true")
    record_parser.set_defaults(func=run_record_command)

    clear_parser = subparsers.add_parser("clear", help=COMMANDS["clear"]["description"])
    clear_parser.add_argument("fixture", help="Fixture id or id prefix")
    clear_parser.set_defaults(func=run_clear_command)

    manual_parser = subparsers.add_parser(
        "add-fixture", help=COMMANDS["add-fixture"]["description"]
    )
    manual_parser.add_argument("home", help="Participant id or name")
    manual_parser.add_argument("away", help="Participant id or name")
    manual_parser.set_defaults(func=run_add_fixture_command)

    standings_parser = subparsers.add_parser(
        "standings", help=COMMANDS["standings"]["description"]
    )
    standings_parser.set_defaults(func=run_standings_command)

    advance_parser = subparsers.add_parser("advance", help=COMMANDS["advance"]["description"])
    advance_parser.set_defaults(func=run_advance_command)

    next_parser = subparsers.add_parser("next-round", help=COMMANDS["next-round"]["description"])
    next_parser.set_defaults(func=run_next_round_command)

    finish_parser = subparsers.add_parser("finish", help=COMMANDS["finish"]["description"])
    finish_parser.set_defaults(func=run_finish_command)

    commentary_parser = subparsers.add_parser(
        "commentary", help=COMMANDS["commentary"]["description"]
    )
    commentary_parser.add_argument("fixture", help="Fixture id or id prefix")
    commentary_parser.set_defaults(func=run_commentary_command)

    predict_parser = subparsers.add_parser("predict", help=COMMANDS["predict"]["description"])
    predict_parser.set_defaults(func=run_predict_command)

    return parser


# ========== Modes ==========


def execute(args: argparse.Namespace) -> int:
    """Run a parsed subcommand, turning Kickoff errors into exit code 1."""
    if args.verbose:
        set_log_level(logging.DEBUG)

    if not hasattr(args, "func"):
        create_main_parser().print_help()
        return 0

    try:
        return args.func(args)
    except KickoffException as e:
        logger.debug("Command failed", exc_info=True)
        print_error(str(e))
        return 1


def run_interactive_mode(snapshot_file: str = DEFAULT_SAVE_FILE) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()
    print(f"Working on {Colors.BOLD}{snapshot_file}{Colors.ENDC}\n")

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )
    parser = create_main_parser()

    while True:
        try:
            user_input = session.prompt("kickoff> ").strip()

            if not user_input:
                continue

            if user_input in ["exit", "quit", "q"]:
                print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
                break

            if user_input in ["/help", "help", "?", "/list"]:
                print_commands_list()
                continue

            if user_input.startswith("/help ") or user_input.startswith("help "):
                cmd = user_input.split()[1].lstrip("/")
                print_command_help(cmd)
                continue

            try:
                parts = shlex.split(user_input)
            except ValueError as e:
                print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
                continue

            # Strip leading "/" if present (support both "/command" and "command")
            command = parts[0].lstrip("/")
            if command not in COMMANDS:
                print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
                print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
                continue

            try:
                args = parser.parse_args(["--file", snapshot_file, command] + parts[1:])
            except SystemExit:
                # argparse calls sys.exit on error, catch it
                continue

            execute(args)

        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the kickoff CLI."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_main_parser()
    args = parser.parse_args(argv)

    # If no subcommand, start interactive mode
    if args.interactive or args.command is None:
        if args.verbose:
            set_log_level(logging.DEBUG)
        return run_interactive_mode(args.file)

    return execute(args)


if __name__ == "__main__":
    sys.exit(main())
