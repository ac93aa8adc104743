# jackut/models/community.py
"""
Model for communities.
A community has an owner, a member list and broadcast messaging: every message
is appended to a shared log and fanned out to the members present at send time.
"""
from collections import deque
from typing import Deque, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class Community(BaseModel):
    """
    Community model.

    Data structure:
    - members: logins in join order, owner first; the owner is never removed
    - log: every message ever broadcast, in order
    - inbox: login -> queue of messages not yet read by that member
      Example: {"alice": deque(["hi"]), "bob": deque([])}
    """
    name: str  # Unique identifier
    description: str = ""
    owner: str  # Login of the creator, permanent while the community exists
    members: List[str] = Field(default_factory=list)
    log: List[str] = Field(default_factory=list)  # Shared broadcast history
    inbox: Dict[str, Deque[str]] = Field(default_factory=dict)  # Per-member delivery queues

    @model_validator(mode="after")
    def _owner_is_member(self):
        if self.owner not in self.members:
            self.members.insert(0, self.owner)
        return self

    def has_member(self, login: str) -> bool:
        return login in self.members

    def add_member(self, login: str) -> None:
        if login not in self.members:
            self.members.append(login)

    def remove_member(self, login: str) -> bool:
        """
        Remove a non-owner member and discard their pending messages.

        Returns:
            True if the login was a member and got removed, False otherwise
            (including when ``login`` is the owner)
        """
        if login == self.owner or login not in self.members:
            return False
        self.members.remove(login)
        self.inbox.pop(login, None)
        return True

    def broadcast(self, body: str) -> None:
        """Append to the log and queue the message for every current member."""
        self.log.append(body)
        for member in self.members:
            self.inbox.setdefault(member, deque()).append(body)

    def next_message(self, login: str) -> Optional[str]:
        """Dequeue the oldest unread message for ``login``, or None if there is none."""
        queue = self.inbox.get(login)
        if not queue:
            return None
        return queue.popleft()
