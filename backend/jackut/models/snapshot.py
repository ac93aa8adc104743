# jackut/models/snapshot.py
"""
Model for the persisted state.
The snapshot is the whole user registry plus the community registry, encoded
as plain records keyed by login / community name.
"""
from typing import Dict

from pydantic import BaseModel, Field

from jackut.models.user import User
from jackut.models.community import Community

SNAPSHOT_VERSION = 1


class Snapshot(BaseModel):
    """
    Snapshot record written on shutdown and read at construction time.

    Community order is creation order; JSON objects keep key order, so the
    order survives a round trip.
    """
    version: int = SNAPSHOT_VERSION  # Format version of this document
    users: Dict[str, User] = Field(default_factory=dict)  # login -> User
    communities: Dict[str, Community] = Field(default_factory=dict)  # name -> Community
