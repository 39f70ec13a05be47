import pytest

from instruqt.exceptions import TransportError
from instruqt.models import TrackInvite

INVITE = {
    "id": "invite-1",
    "publicTitle": "Kubernetes Workshop",
    "runtimeParameters": {"environmentVariables": [{"key": "REGION", "value": "eu"}]},
    "claims": [{"id": "claim-1", "user": {"id": "user-1"}, "claimedAt": "2024-03-01T12:00:00Z"}],
}


def test_get_invite(client, server):
    server.respond({"trackInvite": INVITE})

    invite = client.get_invite("invite-1")

    assert invite.public_title == "Kubernetes Workshop"
    assert invite.runtime_parameters.environment_variables[0].key == "REGION"
    assert invite.claims[0].user.id == "user-1"
    assert invite.claims[0].claimed_at.day == 1
    assert server.variables() == {"inviteId": "invite-1"}


def test_get_invite_empty_id(client, server):
    assert client.get_invite("") == TrackInvite()
    assert server.calls == 0


def test_get_invites(client, server):
    server.respond({"trackInvites": [INVITE, {"id": "invite-2", "runtimeParameters": None}]})

    invites = client.get_invites()

    assert [i.id for i in invites] == ["invite-1", "invite-2"]
    assert invites[1].runtime_parameters.environment_variables == []
    assert server.variables() == {"teamSlug": "test-team"}


def test_get_invites_http_error(client, server):
    server.respond(status_code=500)

    with pytest.raises(TransportError) as exc:
        client.get_invites()

    assert exc.value.status_code == 500
    assert str(exc.value).startswith("GetInvites: HTTP 500")
