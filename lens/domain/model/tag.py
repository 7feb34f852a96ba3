"""Tag entity for labelling content."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lens.domain.model.common import DomainModel
from lens.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are created the first time a name is used and are never deleted.
    A tag links to content of any kind through the kind's junction table.
    """

    id: Optional[TagId] = None
    name: TagName
    created_at: datetime = Field(default_factory=datetime.now)
