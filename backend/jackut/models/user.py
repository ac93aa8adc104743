# jackut/models/user.py
"""
Model for user accounts.
Represents a Jackut user: credentials, profile, relationship collections and
the queue of received recados (direct messages).
"""
from collections import deque
from typing import Deque, Dict, List, Optional

from pydantic import BaseModel, Field

from jackut.core.errors import AttributeNotSet, NoMessages

# Profile attribute that always resolves to the display name
NAME_ATTRIBUTE = "nome"
# Accepted spellings of the display-name attribute
NAME_ATTRIBUTES = frozenset({NAME_ATTRIBUTE, "name"})


class Recado(BaseModel):
    """
    A direct message waiting in a user's queue.

    ``sender`` is None for notifications generated by Jackut itself
    (e.g. mutual crush notices).
    """
    sender: Optional[str] = None  # Login of the user who sent it
    body: str  # Message text returned to the reader


class User(BaseModel):
    """
    User model.

    Relationships are stored as login strings, never as nested users, so the
    whole registry serializes as a flat mapping of records.

    Collections:
    - friends: confirmed friends (insertion-ordered, unique)
    - invitations: logins that invited this user and wait for an answer
    - communities: names of joined communities (insertion order)
    - idols / crushes / enemies: one-directional tags set by this user
    """
    login: str  # Unique identifier, immutable after creation
    password_hash: str  # Argon2 hash, never the plain password
    name: str  # Display name (also exposed as the "nome" attribute)
    attributes: Dict[str, str] = Field(default_factory=dict)  # Custom profile attributes
    friends: List[str] = Field(default_factory=list)
    invitations: List[str] = Field(default_factory=list)
    messages: Deque[Recado] = Field(default_factory=deque)  # FIFO recado queue
    communities: List[str] = Field(default_factory=list)
    idols: List[str] = Field(default_factory=list)
    crushes: List[str] = Field(default_factory=list)
    enemies: List[str] = Field(default_factory=list)

    # -------- profile --------
    def get_attribute(self, attribute: str) -> str:
        """
        Resolve a profile attribute.

        Both "nome" and "name" resolve to the display name.

        Raises:
            AttributeNotSet: If a custom attribute was never filled in
        """
        if attribute in NAME_ATTRIBUTES:
            return self.name
        try:
            return self.attributes[attribute]
        except KeyError:
            raise AttributeNotSet()

    def set_attribute(self, attribute: str, value: str) -> None:
        if attribute in NAME_ATTRIBUTES:
            self.name = value
        else:
            self.attributes[attribute] = value

    # -------- relationships --------
    def is_enemy_of(self, login: str) -> bool:
        return login in self.enemies

    def join(self, community: str) -> None:
        if community not in self.communities:
            self.communities.append(community)

    def forget(self, login: str) -> None:
        """Remove ``login`` from every relationship collection of this user."""
        for collection in (self.friends, self.invitations, self.idols, self.crushes, self.enemies):
            while login in collection:
                collection.remove(login)

    # -------- recados --------
    def receive(self, body: str, sender: Optional[str] = None) -> None:
        self.messages.append(Recado(sender=sender, body=body))

    def read_next(self) -> str:
        """
        Dequeue the oldest recado and return its text.

        Raises:
            NoMessages: If the queue is empty
        """
        if not self.messages:
            raise NoMessages()
        return self.messages.popleft().body

    def purge_from(self, sender: str) -> int:
        """Drop every queued recado sent by ``sender``; returns how many were dropped."""
        kept = deque(m for m in self.messages if m.sender != sender)
        dropped = len(self.messages) - len(kept)
        self.messages = kept
        return dropped
