"""Match commentary and title predictions backed by Google Gemini.

Commentary is best-effort: every public method returns a string, falling back
to a fixed message when the service is not configured or fails. Callers never
need to handle errors from this module.
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

import os
from dataclasses import dataclass
from typing import Any, Optional

import google.generativeai as genai

from kickoff.constants import (
    COMMENTARY_EMPTY_FALLBACK,
    COMMENTARY_ERROR_FALLBACK,
    COMMENTARY_UNAVAILABLE,
    DEFAULT_COMMENTARY_MODEL,
    ENV_API_KEY,
    ENV_MODEL,
    PREDICTION_FALLBACK,
)
from kickoff.exceptions import CommentaryException
from kickoff.models.fixture import Fixture
from kickoff.models.participant import Participant
from kickoff.models.standings import StandingsRow
from kickoff.utils import setup_logger

logger = setup_logger(__name__)

FIXTURE_PROMPT_TEMPLATE = """Act as an excitable, funny esports football commentator.

Match:
{home_name} (playing as {home_team}) vs {away_name} (playing as {away_team}).
Final score: {home_score} - {away_score}.

Give a short two-sentence comment on the result.
If it was a thrashing, tease the loser a little. If it was a draw, say whether it was dull or tense.
"""

PREDICTION_PROMPT_TEMPLATE = """We are in the middle of a football video game tournament.
The current leader is {leader_name} playing as {leader_team}.
{runner_up_name} is following close behind.

Make a spicy 50-word prediction about whether the leader will hold up under the pressure.
Talk like a sports pundit on a late-night football show.
"""


@dataclass
class CommentaryConfig:
    """Connection settings for the commentary service.

    Attributes:
        api_key: Gemini API key; commentary is disabled when empty
        model_name: Gemini model used for both commentary and predictions
    """

    api_key: Optional[str] = None
    model_name: str = DEFAULT_COMMENTARY_MODEL

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "CommentaryConfig":
        """Read ``GEMINI_API_KEY`` and ``KICKOFF_MODEL`` from the environment."""
        return cls(
            api_key=os.environ.get(ENV_API_KEY) or None,
            model_name=os.environ.get(ENV_MODEL) or DEFAULT_COMMENTARY_MODEL,
        )


class GeminiCommentator:
    """Generates short texts about fixtures and the title race.

    A model object exposing ``generate_content(prompt)`` can be injected,
    which bypasses API key handling entirely. Otherwise a Gemini model is
    created on construction when an API key is configured.
    """

    def __init__(
        self, config: Optional[CommentaryConfig] = None, model: Any = None
    ) -> None:
        self.config = config if config is not None else CommentaryConfig.from_env()
        self._model = model

        if self._model is None and self.config.enabled:
            genai.configure(api_key=self.config.api_key)
            self._model = genai.GenerativeModel(self.config.model_name)
            logger.info(f"Commentary enabled with model {self.config.model_name}")

    @property
    def available(self) -> bool:
        """True if a model is ready to answer."""
        return self._model is not None

    def describe_fixture(
        self, fixture: Fixture, home: Participant, away: Participant
    ) -> str:
        """Two-sentence commentary on a played fixture.

        Args:
            fixture: The fixture, with its result recorded
            home: Participant on the home side
            away: Participant on the away side

        Returns:
            Generated commentary, or a fallback message
        """
        if not self.available:
            return COMMENTARY_UNAVAILABLE

        prompt = FIXTURE_PROMPT_TEMPLATE.format(
            home_name=home.name,
            home_team=home.team,
            away_name=away.name,
            away_team=away.team,
            home_score=fixture.home_score,
            away_score=fixture.away_score,
        )

        try:
            text = self._generate(prompt)
        except Exception as e:
            logger.error(f"Commentary failed for fixture {fixture.id}: {e}")
            return COMMENTARY_ERROR_FALLBACK

        return text or COMMENTARY_EMPTY_FALLBACK

    def predict_tournament(self, leader: StandingsRow, runner_up: StandingsRow) -> str:
        """Short prediction about whether the leader holds on.

        Returns:
            Generated prediction, or an empty string when unavailable
        """
        if not self.available:
            return PREDICTION_FALLBACK

        prompt = PREDICTION_PROMPT_TEMPLATE.format(
            leader_name=leader.name,
            leader_team=leader.team,
            runner_up_name=runner_up.name,
        )

        try:
            return self._generate(prompt) or PREDICTION_FALLBACK
        except Exception as e:
            logger.error(f"Prediction failed: {e}")
            return PREDICTION_FALLBACK

    def _generate(self, prompt: str) -> str:
        if self._model is None:
            raise CommentaryException("No commentary model configured")

        logger.debug(f"Requesting commentary ({len(prompt)} characters of prompt)")
        response = self._model.generate_content(prompt)
        text = getattr(response, "text", None)
        return text.strip() if text else ""
