# jackut/core/bootstrap.py
"""
Bootstrap module for application initialization.
Builds the System instance the API serves, restoring the last snapshot if one exists.
"""
import logging

from jackut.config import Settings
from jackut.core.persistence import SnapshotStore
from jackut.core.system import System

logger = logging.getLogger("uvicorn.error")

def create_system(settings: Settings) -> System:
    """
    Create a System backed by the snapshot file configured in settings.

    Args:
        settings: Application settings (uses ``data_file``)

    Returns:
        System with users and communities restored from the snapshot, or
        empty registries on first run

    Raises:
        SnapshotCorrupted: If the snapshot file exists but cannot be decoded
    """
    store = SnapshotStore(settings.data_file)
    system = System(store)
    logger.info("[bootstrap] system ready (env=%s) -> users=%d communities=%d snapshot=%s",
                settings.env, len(system.users), len(system.communities), store.path)
    return system
