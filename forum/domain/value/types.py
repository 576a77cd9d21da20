"""Domain value types for the forum."""

from enum import Enum


class NotificationType(str, Enum):
    """Kind of event a notification reports to its recipient."""

    NEW_COMMENT_ON_YOUR_POST = "NEW_COMMENT_ON_YOUR_POST"
    NEW_REPLY_TO_YOUR_COMMENT = "NEW_REPLY_TO_YOUR_COMMENT"
