# jackut/core/system.py
"""
Jackut system: the single owner of all registries.

Holds the user registry, the community registry and the session registry,
and implements every operation on them. Instances are independent of each
other (no module-level state), so the API keeps one on ``app.state`` and
tests build as many as they need.

Every operation validates first and mutates last, so an operation that raises
leaves the registries untouched.
"""
import logging
from typing import Dict, Iterable

from jackut.core.errors import (
    AccountAlreadyExists,
    AccountNotFound,
    AlreadyCrush,
    AlreadyEnemy,
    AlreadyFriends,
    AlreadyIdol,
    AlreadyMember,
    CommunityNameExists,
    CommunityNotFound,
    EnemyRelation,
    FriendRequestPending,
    InvalidCredentials,
    InvalidLogin,
    InvalidPassword,
    NoCommunityMessages,
    SelfCrush,
    SelfEnemy,
    SelfFriendship,
    SelfIdol,
    SelfMessage,
)
from jackut.core.persistence import SnapshotStore
from jackut.core.security import hash_password, verify_password
from jackut.core.sessions import SessionRegistry
from jackut.models.community import Community
from jackut.models.snapshot import Snapshot
from jackut.models.user import User

logger = logging.getLogger("uvicorn.error")

CRUSH_NOTICE = "{name} é seu paquera - Recado do Jackut."


def format_list(items: Iterable[str]) -> str:
    """Render a collection as ``{a,b,c}`` (``{}`` when empty), keeping order."""
    return "{" + ",".join(items) + "}"


class System:
    """
    Registry of users, communities and sessions, plus snapshot persistence.

    Args:
        store: Snapshot store; if its file exists the registries are loaded from it

    Data structure:
    - users: login -> User
    - communities: name -> Community (dict order = creation order)
    - sessions: token -> login (never persisted)
    """

    def __init__(self, store: SnapshotStore):
        self.store = store
        self.users: Dict[str, User] = {}
        self.communities: Dict[str, Community] = {}
        self.sessions = SessionRegistry()

        snapshot = store.load()
        if snapshot is not None:
            self.users = dict(snapshot.users)
            self.communities = dict(snapshot.communities)

    # ==========================================================================
    # Internal lookups
    # ==========================================================================
    def _user(self, login: str) -> User:
        user = self.users.get(login)
        if user is None:
            raise AccountNotFound()
        return user

    def _community(self, name: str) -> Community:
        community = self.communities.get(name)
        if community is None:
            raise CommunityNotFound()
        return community

    def _session_user(self, token: str) -> User:
        """Resolve a session token to its User (SessionInvalid if unknown)."""
        return self.users[self.sessions.resolve(token)]

    @staticmethod
    def _ensure_not_enemies(user: User, target: User) -> None:
        if user.is_enemy_of(target.login) or target.is_enemy_of(user.login):
            raise EnemyRelation(target.name)

    # ==========================================================================
    # Accounts & sessions
    # ==========================================================================
    def create_account(self, login: str, password: str, name: str) -> None:
        """
        Register a new user account.

        Args:
            login: Unique login (must not be blank)
            password: Plain password (must not be blank, stored hashed)
            name: Display name

        Raises:
            InvalidLogin: If login is empty or blank
            InvalidPassword: If password is empty or blank
            AccountAlreadyExists: If login is already taken
        """
        if not login or not login.strip():
            raise InvalidLogin()
        if not password or not password.strip():
            raise InvalidPassword()
        if login in self.users:
            raise AccountAlreadyExists()
        self.users[login] = User(login=login, password_hash=hash_password(password), name=name)
        logger.info("[accounts] created login=%s", login)

    def login(self, login: str, password: str) -> str:
        """
        Authenticate and open a session.

        Unknown login and wrong password raise the same error so callers
        cannot probe which logins exist.

        Returns:
            New session token

        Raises:
            InvalidCredentials: If login is unknown or password does not match
        """
        user = self.users.get(login)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("[accounts] rejected login attempt for login=%s", login)
            raise InvalidCredentials()
        return self.sessions.open(login)

    # ==========================================================================
    # Profile
    # ==========================================================================
    def get_attribute(self, login: str, attribute: str) -> str:
        return self._user(login).get_attribute(attribute)

    def edit_profile(self, token: str, attribute: str, value: str) -> None:
        self._session_user(token).set_attribute(attribute, value)

    # ==========================================================================
    # Friendship
    # ==========================================================================
    def add_friend(self, token: str, target_login: str) -> None:
        """
        Invite ``target_login`` to be a friend, or accept its pending invitation.

        If the target already invited the caller, both become friends at once
        and the invitation is cleared. Otherwise the caller is recorded in the
        target's pending invitations.

        Raises:
            SessionInvalid: If token is unknown
            AccountNotFound: If target does not exist
            SelfFriendship: If caller and target are the same user
            EnemyRelation: If either side tagged the other as enemy
            AlreadyFriends: If they are already friends
            FriendRequestPending: If the caller already invited the target
        """
        user = self._session_user(token)
        target = self._user(target_login)
        if user.login == target.login:
            raise SelfFriendship()
        self._ensure_not_enemies(user, target)
        if target.login in user.friends:
            raise AlreadyFriends()
        if user.login in target.invitations:
            raise FriendRequestPending()

        if target.login in user.invitations:
            user.invitations.remove(target.login)
            user.friends.append(target.login)
            target.friends.append(user.login)
            return
        target.invitations.append(user.login)

    def is_friend(self, login: str, other: str) -> bool:
        return other in self._user(login).friends

    def friends_of(self, login: str) -> str:
        return format_list(self._user(login).friends)

    # ==========================================================================
    # Recados (direct messages)
    # ==========================================================================
    def send_message(self, token: str, target_login: str, body: str) -> None:
        """
        Queue a recado for ``target_login``.

        Raises:
            SessionInvalid: If token is unknown
            SelfMessage: If caller writes to themselves
            AccountNotFound: If target does not exist
            EnemyRelation: If either side tagged the other as enemy
        """
        user = self._session_user(token)
        if user.login == target_login:
            raise SelfMessage()
        target = self._user(target_login)
        self._ensure_not_enemies(user, target)
        target.receive(body, sender=user.login)

    def read_message(self, token: str) -> str:
        """Dequeue the caller's oldest recado (NoMessages if the queue is empty)."""
        return self._session_user(token).read_next()

    # ==========================================================================
    # Communities
    # ==========================================================================
    def create_community(self, token: str, name: str, description: str) -> None:
        user = self._session_user(token)
        if name in self.communities:
            raise CommunityNameExists()
        self.communities[name] = Community(name=name, description=description, owner=user.login)
        user.join(name)
        logger.info("[communities] created name=%s owner=%s", name, user.login)

    def join_community(self, token: str, name: str) -> None:
        user = self._session_user(token)
        community = self._community(name)
        if community.has_member(user.login):
            raise AlreadyMember()
        community.add_member(user.login)
        user.join(name)

    def broadcast(self, token: str, name: str, body: str) -> None:
        """
        Send a message to every member of a community.

        Only members present now get it in their queue; users joining later
        never see it.
        """
        self._session_user(token)
        self._community(name).broadcast(body)

    def read_community_message(self, token: str) -> str:
        """
        Dequeue the first unread community message for the caller.

        Communities are scanned in creation order and the first one holding
        a message for the caller wins.

        Raises:
            SessionInvalid: If token is unknown
            NoCommunityMessages: If no joined community has a message waiting
        """
        user = self._session_user(token)
        for community in self.communities.values():
            if not community.has_member(user.login):
                continue
            message = community.next_message(user.login)
            if message is not None:
                return message
        raise NoCommunityMessages()

    def communities_of(self, login: str) -> str:
        return format_list(self._user(login).communities)

    def community_description(self, name: str) -> str:
        return self._community(name).description

    def community_owner(self, name: str) -> str:
        return self._community(name).owner

    def community_members(self, name: str) -> str:
        return format_list(self._community(name).members)

    # ==========================================================================
    # Relationship tags
    # ==========================================================================
    def add_idol(self, token: str, idol_login: str) -> None:
        user = self._session_user(token)
        if user.login == idol_login:
            raise SelfIdol()
        idol = self._user(idol_login)
        self._ensure_not_enemies(user, idol)
        if idol.login in user.idols:
            raise AlreadyIdol()
        user.idols.append(idol.login)

    def is_fan(self, login: str, idol_login: str) -> bool:
        return idol_login in self._user(login).idols

    def fans_of(self, login: str) -> str:
        self._user(login)
        return format_list(u.login for u in self.users.values() if login in u.idols)

    def add_crush(self, token: str, crush_login: str) -> None:
        """
        Tag ``crush_login`` as a crush of the caller.

        When the crush is mutual both users receive a recado from Jackut
        announcing it.

        Raises:
            SessionInvalid: If token is unknown
            SelfCrush: If caller targets themselves
            AccountNotFound: If target does not exist
            EnemyRelation: If either side tagged the other as enemy
            AlreadyCrush: If the target is already a crush of the caller
        """
        user = self._session_user(token)
        if user.login == crush_login:
            raise SelfCrush()
        crush = self._user(crush_login)
        self._ensure_not_enemies(user, crush)
        if crush.login in user.crushes:
            raise AlreadyCrush()
        user.crushes.append(crush.login)

        if user.login in crush.crushes:
            user.receive(CRUSH_NOTICE.format(name=crush.name))
            crush.receive(CRUSH_NOTICE.format(name=user.name))

    # Crushes are private: both queries answer only for the session owner.
    def is_crush(self, token: str, crush_login: str) -> bool:
        return crush_login in self._session_user(token).crushes

    def crushes_of(self, token: str) -> str:
        return format_list(self._session_user(token).crushes)

    def add_enemy(self, token: str, enemy_login: str) -> None:
        user = self._session_user(token)
        if user.login == enemy_login:
            raise SelfEnemy()
        enemy = self._user(enemy_login)
        if enemy.login in user.enemies:
            raise AlreadyEnemy()
        user.enemies.append(enemy.login)

    # ==========================================================================
    # Account removal
    # ==========================================================================
    def remove_account(self, token: str) -> None:
        """
        Delete the caller's account and every trace of it.

        - communities owned by the caller are deleted outright
        - the caller leaves every other community
        - every other user forgets the caller (friends, invitations, idols,
          crushes, enemies) and drops joined entries of deleted communities
        - recados sent by the caller are purged from every queue
        - the user record and all of its sessions are deleted
        """
        login = self.sessions.resolve(token)

        for name, community in list(self.communities.items()):
            if community.owner == login:
                del self.communities[name]
                logger.info("[communities] deleted name=%s (owner removed)", name)
            else:
                community.remove_member(login)

        del self.users[login]
        for other in self.users.values():
            other.forget(login)
            other.communities = [c for c in other.communities if c in self.communities]
            other.purge_from(login)

        self.sessions.revoke_login(login)
        logger.info("[accounts] removed login=%s", login)

    # ==========================================================================
    # Lifecycle
    # ==========================================================================
    def reset_system(self) -> None:
        """Wipe every registry and delete the snapshot file. Not recoverable."""
        self.users.clear()
        self.communities.clear()
        self.sessions.clear()
        self.store.delete()
        logger.warning("[system] reset: all users, communities and sessions wiped")

    def snapshot(self) -> Snapshot:
        return Snapshot(users=self.users, communities=self.communities)

    def shutdown(self) -> None:
        """Write users and communities to the snapshot file. Sessions are not saved."""
        self.store.save(self.snapshot())
