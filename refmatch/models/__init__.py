"""Database models package."""

from refmatch.models.profile import Profile
from refmatch.models.swipe import Swipe
from refmatch.models.match import Match
from refmatch.models.friendship import Friendship
from refmatch.models.pull_request import PullRequest
from refmatch.models.chat_message import ChatMessage

__all__ = ["Profile", "Swipe", "Match", "Friendship", "PullRequest", "ChatMessage"]
