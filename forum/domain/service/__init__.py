"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService
from .notification_service import NotificationService
from .post_service import PostService

__all__ = [
    "CommentService",
    "JWTService",
    "LikeService",
    "NotificationService",
    "PostService",
    "Service",
]
