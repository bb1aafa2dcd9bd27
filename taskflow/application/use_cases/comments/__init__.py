"""Comment use cases."""

from taskflow.application.use_cases.comments.comment_operations import CommentService

__all__ = ["CommentService"]
