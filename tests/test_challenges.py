import pytest

from instruqt.exceptions import GraphQLError, TransportError
from instruqt.models import Challenge
from instruqt.options import with_assignment


def test_get_challenge(client, server):
    server.respond(
        {
            "challenge": {
                "id": "challenge-123",
                "slug": "first-steps",
                "title": "First Steps",
                "index": 0,
                "status": "unlocked",
                "track": {"id": "track-123"},
                "attempts": [{"message": "try again", "timestamp": "2024-01-01T00:00:00Z"}],
            }
        }
    )

    challenge = client.get_challenge("challenge-123")

    assert challenge.id == "challenge-123"
    assert challenge.track.id == "track-123"
    assert challenge.attempts[0].message == "try again"
    assert challenge.assignment == ""
    assert server.variables() == {"challengeId": "challenge-123"}
    assert "assignment" not in server.document()


def test_get_challenge_with_assignment(client, server):
    server.respond({"challenge": {"id": "challenge-123", "assignment": "Run `ls`"}})

    challenge = client.get_challenge("challenge-123", with_assignment())

    assert challenge.assignment == "Run `ls`"
    assert "assignment" in server.document()


def test_get_challenge_empty_id(client, server):
    assert client.get_challenge("") == Challenge()
    assert client.get_user_challenge("user-1", "") == Challenge()
    assert client.get_challenges("") == []
    assert server.calls == 0


def test_get_challenge_error(client, server):
    server.respond(errors=[{"message": "not allowed"}])

    with pytest.raises(GraphQLError):
        client.get_challenge("challenge-123")


def test_get_user_challenge(client, server):
    server.respond({"challenge": {"id": "challenge-123", "status": "completed"}})

    challenge = client.get_user_challenge("user-123", "challenge-123")

    assert challenge.status == "completed"
    assert server.operation() == "GetUserChallenge"
    assert server.variables() == {"challengeId": "challenge-123", "userId": "user-123"}


def test_get_challenges(client, server):
    server.respond({"challenges": [{"id": "a", "index": 0}, {"id": "b", "index": 1}]})

    challenges = client.get_challenges("track-123")

    assert [c.index for c in challenges] == [0, 1]
    assert server.variables() == {"trackId": "track-123", "teamSlug": "test-team"}


def test_skip_to_challenge(client, server):
    server.respond({"skipToChallenge": {"id": "challenge-123", "status": "unlocked"}})

    assert client.skip_to_challenge("user-123", "track-123", "challenge-123") is None
    assert server.document().lstrip().startswith("mutation SkipToChallenge")
    assert server.variables() == {
        "trackID": "track-123",
        "challengeID": "challenge-123",
        "userID": "user-123",
    }


def test_skip_to_challenge_error(client, server):
    server.respond(status_code=403)

    with pytest.raises(TransportError):
        client.skip_to_challenge("user-123", "track-123", "challenge-123")
