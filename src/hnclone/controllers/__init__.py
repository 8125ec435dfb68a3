"""Controllers wrapping use cases in a uniform result envelope."""

from hnclone.controllers.comment_controller import CommentController, StoryLookup
from hnclone.controllers.result import ControllerResult
from hnclone.controllers.story_controller import StoryController

__all__ = [
    "CommentController",
    "ControllerResult",
    "StoryController",
    "StoryLookup",
]
