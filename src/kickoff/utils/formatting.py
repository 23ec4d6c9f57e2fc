"""Plain text rendering of league tables and fixture lists for the terminal."""

from typing import List, Optional, Sequence, Union

from kickoff.constants import BYE_ID, KNOCKOUT_ROUND_NAMES, MANUAL_ROUND, MANUAL_ROUND_NAME
from kickoff.models.enums import Stage
from kickoff.models.fixture import Fixture
from kickoff.models.standings import StandingsRow

NAME_WIDTH = 24
TEAM_WIDTH = 18


def round_label(round_number: int, stage: Union[Stage, str], is_manual: bool = False) -> str:
    """Human readable name of a round.

    Examples:
        >>> round_label(3, Stage.LEAGUE)
        'Matchday 3'
        >>> round_label(4, Stage.KNOCKOUT)
        'Semifinals'
        >>> round_label(32, Stage.KNOCKOUT)
        'Round of 32'
    """
    if is_manual or round_number == MANUAL_ROUND:
        return MANUAL_ROUND_NAME
    if Stage(stage) == Stage.LEAGUE:
        return f"Matchday {round_number}"
    return KNOCKOUT_ROUND_NAMES.get(round_number, f"Round of {round_number}")


def format_standings(rows: Sequence[StandingsRow]) -> str:
    """Format the league table as an ASCII table.

    Args:
        rows: Standings, already sorted

    Returns:
        Formatted string for terminal display
    """
    lines = []
    header = (
        f"{'Pos':<5}{'Participant':<{NAME_WIDTH}} {'Team':<{TEAM_WIDTH}}"
        f"{'P':>4}{'W':>4}{'D':>4}{'L':>4}{'GF':>5}{'GA':>5}{'GD':>5}{'Pts':>5}"
    )
    lines.append(header)
    lines.append("-" * len(header))

    for position, row in enumerate(rows, 1):
        goal_difference = f"{row.goal_difference:+d}" if row.goal_difference else "0"
        lines.append(
            f"{position:<5}{_fit(row.name, NAME_WIDTH):<{NAME_WIDTH}} "
            f"{_fit(row.team, TEAM_WIDTH):<{TEAM_WIDTH}}"
            f"{row.played:>4}{row.won:>4}{row.drawn:>4}{row.lost:>4}"
            f"{row.goals_for:>5}{row.goals_against:>5}{goal_difference:>5}{row.points:>5}"
        )

    if not rows:
        lines.append("(no participants)")

    return "\n".join(lines)


def format_fixtures(tournament, stage: Optional[Union[Stage, str]] = None) -> str:
    """Format the fixtures of one stage grouped by round.

    Args:
        tournament: A :class:`~kickoff.models.tournament.tournament.Tournament`
        stage: Stage to show, defaults to the current one

    Returns:
        Formatted string for terminal display
    """
    stage = Stage(stage) if stage is not None else tournament.current_stage
    grouped = tournament.fixtures_by_round(stage)
    if not grouped:
        return f"No {stage.value.lower()} fixtures."

    lines: List[str] = []
    for round_number, fixtures in grouped.items():
        lines.append(f"=== {round_label(round_number, stage)} ===")
        for fixture in fixtures:
            lines.append(_format_fixture_line(tournament, fixture))
            if fixture.annotation:
                lines.append(f"        \"{fixture.annotation}\"")
        lines.append("")

    return "\n".join(lines).rstrip()


def _format_fixture_line(tournament, fixture: Fixture) -> str:
    home = _side_label(tournament, fixture.home_id)
    away = _side_label(tournament, fixture.away_id)
    if fixture.is_played:
        score = f"{fixture.home_score} - {fixture.away_score}"
    else:
        score = "vs"
    suffix = " (bye)" if fixture.is_bye else ""
    return f"  [{fixture.id}] {home:>{NAME_WIDTH}}  {score:^7}  {away}{suffix}"


def _side_label(tournament, participant_id: str) -> str:
    if participant_id == BYE_ID:
        return BYE_ID
    participant = tournament.state.get_participant(participant_id)
    return participant.name if participant else participant_id


def _fit(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 2] + ".."
