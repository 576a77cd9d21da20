"""User entity."""

from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.value import UserId


class User(DomainModel):
    """Public author projection of a user account."""

    id: UserId
    name: str
    username: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None
