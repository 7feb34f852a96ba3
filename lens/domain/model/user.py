"""User entity.

Accounts are created by the authentication service; this API only reads
them to resolve display names.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lens.domain.model.common import DomainModel
from lens.domain.value import UserId


class User(DomainModel):
    """Registered user."""

    id: UserId
    username: str = Field(min_length=1, max_length=100)
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    is_deleted: bool = False
