"""Strongly typed identifiers for estate domain entities.

Using NewType keeps agent, property and post IDs from being mixed up
even though all of them are UUIDs.
"""

from typing import NewType
from uuid import UUID

# Listing catalog
AgentId = NewType("AgentId", UUID)
AmenityId = NewType("AmenityId", UUID)
LocationId = NewType("LocationId", UUID)
PropertyId = NewType("PropertyId", UUID)
PropertyTypeId = NewType("PropertyTypeId", UUID)

# Content
CategoryId = NewType("CategoryId", UUID)
CommentId = NewType("CommentId", UUID)
MediaId = NewType("MediaId", UUID)
PostId = NewType("PostId", UUID)
TagId = NewType("TagId", UUID)
SeoSettingId = NewType("SeoSettingId", UUID)

# Accounts
UserId = NewType("UserId", UUID)
TeamId = NewType("TeamId", UUID)
