"""Client-side state machine for the forum: session, lists and selection."""

from forum_client.state.app import ForumClientApp
from forum_client.state.base import EditState
from forum_client.state.base import FormState
from forum_client.state.base import ListState
from forum_client.state.base import Outcome
from forum_client.state.comments import CommentListController
from forum_client.state.posts import PostListController
from forum_client.state.prompts import ScriptedPrompts
from forum_client.state.prompts import UserPrompts
from forum_client.state.selection import SelectionCoordinator
from forum_client.state.session import SessionContext
from forum_client.state.topics import TopicListController

__all__ = [
    "CommentListController",
    "EditState",
    "ForumClientApp",
    "FormState",
    "ListState",
    "Outcome",
    "PostListController",
    "ScriptedPrompts",
    "SelectionCoordinator",
    "SessionContext",
    "TopicListController",
    "UserPrompts",
]
