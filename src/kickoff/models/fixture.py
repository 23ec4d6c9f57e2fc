"""Fixture data class."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from kickoff.constants import BYE_ID
from kickoff.exceptions import InvalidFixtureException, InvalidResultException
from kickoff.models.enums import FixtureStatus, Stage
from kickoff.utils import generate_id


@dataclass
class Fixture:
    """A single head-to-head match between two participants.

    Attributes
    ----------
    id : str
        Unique fixture identifier.
    home_id : str
        Participant id of the home side, or ``BYE_ID``.
    away_id : str
        Participant id of the away side, or ``BYE_ID``.
    round : int
        League: matchday starting at 1. Knockout: participants remaining when
        the round starts (2 = final, 4 = semifinals). Manual fixtures use
        ``MANUAL_ROUND``.
    stage : Stage
        Phase the fixture belongs to.
    status : FixtureStatus
        ``PLAYED`` exactly when both scores are set.
    home_score, away_score : int or None
        Goals for each side, ``None`` until played.
    is_manual : bool
        Added by hand rather than by a generator.
    annotation : str or None
        Free-text commentary attached after the result was recorded.
    """

    id: str
    home_id: str
    away_id: str
    round: int
    stage: Stage
    status: FixtureStatus = FixtureStatus.SCHEDULED
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    is_manual: bool = False
    annotation: Optional[str] = None

    def __post_init__(self) -> None:
        self.stage = Stage(self.stage)
        self.status = FixtureStatus(self.status)

        if self.home_id == self.away_id:
            raise InvalidFixtureException(
                f"Fixture {self.id} pairs {self.home_id} with itself"
            )
        if self.round < 1:
            raise InvalidFixtureException(
                f"Fixture {self.id} has invalid round {self.round}"
            )

        scores_set = (self.home_score is not None, self.away_score is not None)
        if scores_set[0] != scores_set[1]:
            raise InvalidResultException(
                f"Fixture {self.id} must have both scores set or both unset"
            )
        if (self.status == FixtureStatus.PLAYED) != scores_set[0]:
            raise InvalidResultException(
                f"Fixture {self.id} is {self.status.value} but scores are "
                f"{self.home_score}-{self.away_score}"
            )
        for score in (self.home_score, self.away_score):
            if score is None:
                continue
            if isinstance(score, bool) or not isinstance(score, int) or score < 0:
                raise InvalidResultException(
                    f"Fixture {self.id} has invalid score {score!r}"
                )

    @classmethod
    def scheduled(
        cls,
        home_id: str,
        away_id: str,
        round_number: int,
        stage: Stage,
        is_manual: bool = False,
    ) -> "Fixture":
        """Create an unplayed fixture with a fresh id."""
        return cls(
            id=generate_id(cls.__name__),
            home_id=home_id,
            away_id=away_id,
            round=round_number,
            stage=stage,
            is_manual=is_manual,
        )

    # ========== Queries ==========

    @property
    def is_played(self) -> bool:
        return self.status == FixtureStatus.PLAYED

    @property
    def is_bye(self) -> bool:
        """True if one side is the bye sentinel."""
        return BYE_ID in (self.home_id, self.away_id)

    @property
    def is_draw(self) -> bool:
        return self.is_played and self.home_score == self.away_score

    @property
    def winner_id(self) -> Optional[str]:
        """Id of the side that won, or None if unplayed or drawn."""
        if not self.is_played or self.is_draw:
            return None
        return self.home_id if self.home_score > self.away_score else self.away_id

    @property
    def loser_id(self) -> Optional[str]:
        if not self.is_played or self.is_draw:
            return None
        return self.away_id if self.home_score > self.away_score else self.home_id

    def involves(self, participant_id: str) -> bool:
        return participant_id in (self.home_id, self.away_id)

    # ========== Copies ==========

    def with_result(self, home_score: int, away_score: int) -> "Fixture":
        """Return a played copy of this fixture. Any old annotation is dropped."""
        return replace(
            self,
            home_score=home_score,
            away_score=away_score,
            status=FixtureStatus.PLAYED,
            annotation=None,
        )

    def cleared(self) -> "Fixture":
        """Return an unplayed copy of this fixture."""
        return replace(
            self,
            home_score=None,
            away_score=None,
            status=FixtureStatus.SCHEDULED,
            annotation=None,
        )

    def reversed(self) -> "Fixture":
        """Return the return-leg copy: sides swapped, new id, no result."""
        return replace(
            self,
            id=generate_id(type(self).__name__),
            home_id=self.away_id,
            away_id=self.home_id,
            home_score=None,
            away_score=None,
            status=FixtureStatus.SCHEDULED,
            annotation=None,
        )

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize fixture to dictionary."""
        return {
            "id": self.id,
            "home_id": self.home_id,
            "away_id": self.away_id,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "status": self.status.value,
            "round": self.round,
            "stage": self.stage.value,
            "is_manual": self.is_manual,
            "annotation": self.annotation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Fixture":
        """Deserialize fixture from dictionary."""
        return cls(
            id=data["id"],
            home_id=data["home_id"],
            away_id=data["away_id"],
            round=data["round"],
            stage=Stage(data["stage"]),
            status=FixtureStatus(data.get("status", FixtureStatus.SCHEDULED.value)),
            home_score=data.get("home_score"),
            away_score=data.get("away_score"),
            is_manual=data.get("is_manual", False),
            annotation=data.get("annotation"),
        )
