# jackut/core/__init__.py
"""
Core application modules.
Contains the Jackut domain logic and its infrastructure:
- bootstrap: Builds the System from settings at startup
- errors: Typed error taxonomy shared by every operation
- persistence: JSON snapshot store for users and communities
- security: Password hashing and verification
- sessions: Ephemeral session token registry
- system: The System context object implementing every operation
"""
