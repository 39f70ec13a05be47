import pytest

from instruqt.exceptions import GraphQLError
from instruqt.models import Review
from instruqt.options import with_play

REVIEW = {
    "id": "review123",
    "score": 5,
    "content": "Excellent track! Learned a lot.",
    "created_at": "2024-03-01T09:00:00Z",
    "updated_at": "2024-04-01T09:00:00Z",
}


def test_get_review(client, server):
    server.respond({"trackReview": REVIEW})

    review = client.get_review("review123")

    assert review.score == 5
    assert review.content == "Excellent track! Learned a lot."
    assert review.updated_at.month == 4
    assert review.play is None
    assert server.variables() == {"id": "review123"}
    assert "play" not in server.document()


def test_get_review_with_play(client, server):
    server.respond({"trackReview": {**REVIEW, "play": {"id": "play456", "startedAt": None}}})

    review = client.get_review("review123", with_play())

    assert review.play is not None
    assert review.play.id == "play456"
    assert "play { id startedAt }" in server.document()


def test_get_review_empty_id(client, server):
    assert client.get_review("") == Review()
    assert server.calls == 0


def test_get_review_query_error(client, server):
    server.respond(errors=[{"message": "review not found"}])

    with pytest.raises(GraphQLError):
        client.get_review("review-123")


def test_get_reviews(client, server):
    server.respond({"trackReviews": {"totalCount": 12, "nodes": [REVIEW, {**REVIEW, "id": "r2"}]}})

    count, reviews = client.get_reviews("track-123")

    assert count == 12
    assert [r.id for r in reviews] == ["review123", "r2"]
    assert server.variables() == {"trackId": "track-123"}


def test_get_reviews_empty_track(client, server):
    assert client.get_reviews("") == (0, [])
    assert server.calls == 0
