from pydantic import Field

from instruqt.graphql import Operation
from instruqt.models import InstruqtModel, Review, TrackReviews
from instruqt.options import Option, build_options
from instruqt.resources import selections
from instruqt.resources.base import Resource


class ReviewResponse(InstruqtModel):
    track_review: Review = Field(default_factory=Review, alias="trackReview")


class ReviewsResponse(InstruqtModel):
    track_reviews: TrackReviews = Field(default_factory=TrackReviews, alias="trackReviews")


def review_query(include_play: bool = False) -> Operation[ReviewResponse]:
    return Operation(
        "GetReview",
        "query GetReview($id: ID!) {\n"
        "  trackReview(reviewID: $id) {"
        + selections.review(include_play)
        + "  }\n}\n",
        ReviewResponse,
    )


def reviews_query(include_play: bool = False) -> Operation[ReviewsResponse]:
    return Operation(
        "GetReviews",
        "query GetReviews($trackId: String!) {\n"
        "  trackReviews(trackID: $trackId) {\n"
        "    totalCount\n"
        "    nodes {"
        + selections.review(include_play)
        + "    }\n  }\n}\n",
        ReviewsResponse,
    )


class ReviewsMixin(Resource):
    def get_review(self, review_id: str, *opts: Option) -> Review:
        """Get a single review. `with_play()` includes the play that produced it."""
        if not review_id:
            return Review()

        options = build_options(*opts)
        q = self._query(review_query(options.include_play), {"id": review_id})
        return q.track_review

    def get_reviews(self, track_id: str, *opts: Option) -> tuple[int, list[Review]]:
        """Get the reviews of a track as (total count, reviews)."""
        if not track_id:
            return 0, []

        options = build_options(*opts)
        q = self._query(reviews_query(options.include_play), {"trackId": track_id})
        return q.track_reviews.total_count, q.track_reviews.nodes
