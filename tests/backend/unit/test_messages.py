"""
Unit tests for recados (direct messages).
"""
import pytest

from jackut.core.errors import (
    AccountNotFound,
    EnemyRelation,
    NoMessages,
    SelfMessage,
    SessionInvalid,
)


class TestRecados:

    def test_fifo_and_sender_not_exposed(self, system, signup):
        a = signup("alice")
        b = signup("bob")

        system.send_message(a, "bob", "M1")
        system.send_message(a, "bob", "M2")

        assert system.read_message(b) == "M1"
        assert system.read_message(b) == "M2"

    def test_body_with_colon_is_kept_whole(self, system, signup):
        a = signup("alice")
        b = signup("bob")
        system.send_message(a, "bob", "hora: 10:30")
        assert system.read_message(b) == "hora: 10:30"

    def test_empty_queue(self, system, signup):
        b = signup("bob")
        with pytest.raises(NoMessages) as exc:
            system.read_message(b)
        assert str(exc.value) == "Não há recados."

    def test_self_message(self, system, signup):
        a = signup("alice")
        with pytest.raises(SelfMessage) as exc:
            system.send_message(a, "alice", "oi")
        assert str(exc.value) == "Usuário não pode enviar recado para si mesmo."

    def test_unknown_recipient(self, system, signup):
        a = signup("alice")
        with pytest.raises(AccountNotFound):
            system.send_message(a, "ghost", "oi")

    def test_invalid_session(self, system, signup):
        signup("bob")
        with pytest.raises(SessionInvalid):
            system.send_message("bogus", "bob", "oi")
        with pytest.raises(SessionInvalid):
            system.read_message("bogus")

    def test_enemy_blocks_messages_both_ways(self, system, signup):
        a = signup("alice")
        b = signup("bob")
        system.add_enemy(b, "alice")

        with pytest.raises(EnemyRelation):
            system.send_message(a, "bob", "oi")
        with pytest.raises(EnemyRelation):
            system.send_message(b, "alice", "oi")
        assert len(system.users["alice"].messages) == 0
        assert len(system.users["bob"].messages) == 0
