"""Vote entity.

Votes are community curation: each user holds at most one vote per
content item, which is either up, down, or (soft-deleted) absent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lens.domain.model.common import DomainModel
from lens.domain.value import ContentId, ContentKind, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One row per (post_type, post_id, user_id) (database unique constraint)
    - Removing a vote soft-deletes the row; voting again revives it
    - Polymorphic reference to content via (post_type, post_id)
    """

    id: Optional[VoteId] = None
    post_type: ContentKind
    post_id: ContentId
    user_id: UserId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    is_deleted: bool = False

    @property
    def state(self) -> Optional[VoteType]:
        """Current direction, or None when the vote is removed."""
        return None if self.is_deleted else self.vote_type

    def toggled(self, requested: VoteType, at: Optional[datetime] = None) -> "Vote":
        """Apply a vote request to this row.

        Repeating the active direction removes the vote. Any other
        request sets the direction and revives the row.

        Args:
            requested: Requested direction
            at: Time of the change (defaults to now)

        Returns:
            Updated copy of the vote
        """
        at = at or datetime.now()
        if self.state == requested:
            return self.model_copy(update={"is_deleted": True, "updated_at": at})
        return self.model_copy(
            update={"vote_type": requested, "is_deleted": False, "updated_at": at}
        )
