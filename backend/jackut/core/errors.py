# jackut/core/errors.py
"""
Typed errors raised by System operations.

Every error carries a stable ``code`` (used in API responses), the HTTP status
the API layer answers with, and the user-facing message. Operations validate
before they mutate, so catching any of these means nothing changed.
"""
from fastapi import status


class JackutError(Exception):
    """Base class for every validation failure surfaced to the caller."""

    code: str = "JACKUT_ERROR"
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Operação inválida."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> dict:
        """Error payload in the ``{"code", "message"}`` shape used by the API."""
        return {"code": self.code, "message": str(self)}


# -------- accounts / sessions --------
class InvalidLogin(JackutError):
    code = "INVALID_LOGIN"
    message = "Login inválido."


class InvalidPassword(JackutError):
    code = "INVALID_PASSWORD"
    message = "Senha inválida."


class AccountAlreadyExists(JackutError):
    code = "ACCOUNT_EXISTS"
    status_code = status.HTTP_409_CONFLICT
    message = "Conta com esse nome já existe."


class InvalidCredentials(JackutError):
    """Unknown login and wrong password share this error (no login enumeration)."""

    code = "AUTH_INVALID_CREDENTIALS"
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Login ou senha inválidos."


class AccountNotFound(JackutError):
    code = "USER_NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    message = "Usuário não cadastrado."


class SessionInvalid(JackutError):
    code = "AUTH_INVALID_SESSION"
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Usuário não cadastrado."


class AttributeNotSet(JackutError):
    code = "ATTRIBUTE_NOT_SET"
    status_code = status.HTTP_404_NOT_FOUND
    message = "Atributo não preenchido."


# -------- relationships --------
class SelfFriendship(JackutError):
    code = "SELF_FRIENDSHIP"
    message = "Usuário não pode adicionar a si mesmo como amigo."


class AlreadyFriends(JackutError):
    code = "ALREADY_FRIENDS"
    status_code = status.HTTP_409_CONFLICT
    message = "Usuário já está adicionado como amigo."


class FriendRequestPending(JackutError):
    code = "FRIEND_REQUEST_PENDING"
    status_code = status.HTTP_409_CONFLICT
    message = "Usuário já está adicionado como amigo, esperando aceitação do convite."


class EnemyRelation(JackutError):
    """Raised when either side of the pair tagged the other as enemy."""

    code = "ENEMY_RELATION"
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, name: str):
        super().__init__(f"Função inválida: {name} é seu inimigo.")
        self.name = name


class SelfIdol(JackutError):
    code = "SELF_IDOL"
    message = "Usuário não pode ser fã de si mesmo."


class AlreadyIdol(JackutError):
    code = "ALREADY_IDOL"
    status_code = status.HTTP_409_CONFLICT
    message = "Usuário já está adicionado como ídolo."


class SelfCrush(JackutError):
    code = "SELF_CRUSH"
    message = "Usuário não pode ser paquera de si mesmo."


class AlreadyCrush(JackutError):
    code = "ALREADY_CRUSH"
    status_code = status.HTTP_409_CONFLICT
    message = "Usuário já está adicionado como paquera."


class SelfEnemy(JackutError):
    code = "SELF_ENEMY"
    message = "Usuário não pode ser inimigo de si mesmo."


class AlreadyEnemy(JackutError):
    code = "ALREADY_ENEMY"
    status_code = status.HTTP_409_CONFLICT
    message = "Usuário já está adicionado como inimigo."


# -------- messages --------
class SelfMessage(JackutError):
    code = "SELF_MESSAGE"
    message = "Usuário não pode enviar recado para si mesmo."


class NoMessages(JackutError):
    code = "NO_MESSAGES"
    status_code = status.HTTP_404_NOT_FOUND
    message = "Não há recados."


class NoCommunityMessages(NoMessages):
    code = "NO_COMMUNITY_MESSAGES"
    message = "Não há mensagens."


# -------- communities --------
class CommunityNameExists(JackutError):
    code = "COMMUNITY_EXISTS"
    status_code = status.HTTP_409_CONFLICT
    message = "Comunidade com esse nome já existe."


class CommunityNotFound(JackutError):
    code = "COMMUNITY_NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    message = "Comunidade não existe."


class AlreadyMember(JackutError):
    code = "ALREADY_MEMBER"
    status_code = status.HTTP_409_CONFLICT
    message = "Usuario já faz parte dessa comunidade."


# -------- persistence --------
class SnapshotCorrupted(JackutError):
    code = "SNAPSHOT_CORRUPTED"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Snapshot file could not be read."
