# jackut/models/__init__.py
"""
Models module initialization.
Exports all models for convenient imports throughout the application.

Models exported:
- User: User account, profile and relationship collections
- Recado: Direct message waiting in a user's queue
- Community: Community with members and broadcast queues
- Snapshot: Persisted registry state
"""
from .user import User, Recado, NAME_ATTRIBUTE, NAME_ATTRIBUTES
from .community import Community
from .snapshot import Snapshot, SNAPSHOT_VERSION
