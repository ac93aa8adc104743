import pytest


pytestmark = pytest.mark.asyncio


async def test_profile_edit_and_read(client, auth_header_factory):
    headers, login = await auth_header_factory(name="Jacques Sauve")

    name_resp = await client.get(f"/api/v1/users/{login}/attributes/nome")
    assert name_resp.status_code == 200
    assert name_resp.json()["data"]["value"] == "Jacques Sauve"
    alias = await client.get(f"/api/v1/users/{login}/attributes/name")
    assert alias.json()["data"]["value"] == "Jacques Sauve"

    missing = await client.get(f"/api/v1/users/{login}/attributes/cidade")
    assert missing.status_code == 404
    assert missing.json()["error"]["message"] == "Atributo não preenchido."

    edit = await client.put("/api/v1/profile", headers=headers, json={"attribute": "cidade", "value": "Maceio"})
    assert edit.status_code == 200

    city = await client.get(f"/api/v1/users/{login}/attributes/cidade")
    assert city.json()["data"]["value"] == "Maceio"


async def test_friendship_flow(client, auth_header_factory):
    a_headers, a = await auth_header_factory()
    b_headers, b = await auth_header_factory()

    invite = await client.post("/api/v1/friends", headers=a_headers, json={"target": b})
    assert invite.status_code == 200

    pending = await client.post("/api/v1/friends", headers=a_headers, json={"target": b})
    assert pending.status_code == 409
    assert pending.json()["error"]["code"] == "FRIEND_REQUEST_PENDING"

    not_yet = await client.get(f"/api/v1/users/{a}/friends/{b}")
    assert not_yet.json()["data"]["isFriend"] is False

    accept = await client.post("/api/v1/friends", headers=b_headers, json={"target": a})
    assert accept.status_code == 200

    friends = await client.get(f"/api/v1/users/{a}/friends")
    assert friends.json()["data"]["friends"] == "{" + b + "}"
    both = await client.get(f"/api/v1/users/{b}/friends/{a}")
    assert both.json()["data"]["isFriend"] is True

    again = await client.post("/api/v1/friends", headers=b_headers, json={"target": a})
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ALREADY_FRIENDS"

    itself = await client.post("/api/v1/friends", headers=a_headers, json={"target": a})
    assert itself.status_code == 400
    assert itself.json()["error"]["code"] == "SELF_FRIENDSHIP"


async def test_recados_fifo(client, auth_header_factory):
    a_headers, a = await auth_header_factory()
    b_headers, b = await auth_header_factory()

    for body in ("M1", "M2"):
        resp = await client.post("/api/v1/messages", headers=a_headers, json={"target": b, "body": body})
        assert resp.status_code == 200

    first = await client.post("/api/v1/messages/read", headers=b_headers)
    second = await client.post("/api/v1/messages/read", headers=b_headers)
    empty = await client.post("/api/v1/messages/read", headers=b_headers)

    assert first.json()["data"]["message"] == "M1"
    assert second.json()["data"]["message"] == "M2"
    assert empty.status_code == 404
    assert empty.json()["error"]["message"] == "Não há recados."

    to_self = await client.post("/api/v1/messages", headers=a_headers, json={"target": a, "body": "x"})
    assert to_self.status_code == 400


async def test_enemy_blocks_friendship_and_messages(client, auth_header_factory):
    a_headers, a = await auth_header_factory(name="Alice")
    b_headers, b = await auth_header_factory(name="Bob")

    enemy = await client.post("/api/v1/relations/enemies", headers=a_headers, json={"target": b})
    assert enemy.status_code == 200

    for headers, target in ((a_headers, b), (b_headers, a)):
        friend = await client.post("/api/v1/friends", headers=headers, json={"target": target})
        assert friend.status_code == 403
        assert friend.json()["error"]["code"] == "ENEMY_RELATION"
        msg = await client.post("/api/v1/messages", headers=headers, json={"target": target, "body": "x"})
        assert msg.status_code == 403

    blocked = await client.post("/api/v1/friends", headers=b_headers, json={"target": a})
    assert blocked.json()["error"]["message"] == "Função inválida: Alice é seu inimigo."


async def test_idols_and_fans(client, auth_header_factory):
    a_headers, a = await auth_header_factory()
    c_headers, c = await auth_header_factory()
    _, star = await auth_header_factory()

    await client.post("/api/v1/relations/idols", headers=a_headers, json={"target": star})
    await client.post("/api/v1/relations/idols", headers=c_headers, json={"target": star})

    fans = await client.get(f"/api/v1/users/{star}/fans")
    assert fans.json()["data"]["fans"] == "{" + f"{a},{c}" + "}"
    is_fan = await client.get(f"/api/v1/users/{a}/idols/{star}")
    assert is_fan.json()["data"]["isFan"] is True

    dup = await client.post("/api/v1/relations/idols", headers=a_headers, json={"target": star})
    assert dup.status_code == 409
    assert dup.json()["error"]["code"] == "ALREADY_IDOL"


async def test_mutual_crush_notifies_both(client, auth_header_factory):
    a_headers, a = await auth_header_factory(name="Alice")
    b_headers, b = await auth_header_factory(name="Bob")

    await client.post("/api/v1/relations/crushes", headers=a_headers, json={"target": b})
    crushes = await client.get("/api/v1/relations/crushes", headers=a_headers)
    assert crushes.json()["data"]["crushes"] == "{" + b + "}"
    is_crush = await client.get(f"/api/v1/relations/crushes/{b}", headers=a_headers)
    assert is_crush.json()["data"]["isCrush"] is True

    await client.post("/api/v1/relations/crushes", headers=b_headers, json={"target": a})

    a_msg = await client.post("/api/v1/messages/read", headers=a_headers)
    b_msg = await client.post("/api/v1/messages/read", headers=b_headers)
    assert a_msg.json()["data"]["message"] == "Bob é seu paquera - Recado do Jackut."
    assert b_msg.json()["data"]["message"] == "Alice é seu paquera - Recado do Jackut."

    private = await client.get("/api/v1/relations/crushes")
    assert private.status_code == 401
