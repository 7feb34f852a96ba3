"""Strongly typed identifiers for InspireLens domain entities.

All identifiers are database-assigned integers. Content ids are only
unique within one content kind; the pair (kind, id) identifies an item.
"""

from typing import NewType

UserId = NewType("UserId", int)
CategoryId = NewType("CategoryId", int)
ContentId = NewType("ContentId", int)
TagId = NewType("TagId", int)
VoteId = NewType("VoteId", int)
CommentId = NewType("CommentId", int)

# Ids are stored in 32-bit integer columns
MAX_ID = 2**31 - 1
