"""Free-text commentary for fixtures and standings."""

from kickoff.commentary.gemini import CommentaryConfig, GeminiCommentator

__all__ = ["CommentaryConfig", "GeminiCommentator"]
