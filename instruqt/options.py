"""Optional query shape and filters.

Methods accept any number of options; each one returns an updated copy of
`QueryOptions`, so nothing is shared between calls:

    client.get_track_by_id("track-id", with_challenges(), with_reviews())
    client.get_plays(start, end, 25, 0, with_track_ids("t1", "t2"))
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable


class PlayType(str, Enum):
    ALL = "ALL"
    DEVELOPER = "DEVELOPER"
    NORMAL = "NORMAL"


class OrderBy(str, Enum):
    COMPLETION_PERCENT = "completion_percent"
    TIME_SPENT = "time_spent"


class Direction(str, Enum):
    ASC = "Asc"
    DESC = "Desc"


@dataclass(frozen=True)
class Ordering:
    order_by: OrderBy = OrderBy.COMPLETION_PERCENT
    direction: Direction = Direction.DESC


@dataclass(frozen=True)
class QueryOptions:
    # get_review / get_reviews
    include_play: bool = False

    # get_track*
    include_challenges: bool = False
    include_reviews: bool = False

    # get_challenge*
    include_assignment: bool = False

    # get_plays
    track_ids: tuple[str, ...] = ()
    track_invite_ids: tuple[str, ...] = ()
    landing_page_ids: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    user_ids: tuple[str, ...] = ()
    play_type: PlayType = PlayType.ALL
    ordering: Ordering = field(default_factory=Ordering)

    # get_sandboxes
    state: str = ""
    pool_ids: tuple[str, ...] = ()


Option = Callable[[QueryOptions], QueryOptions]


def build_options(*opts: Option) -> QueryOptions:
    options = QueryOptions()
    for opt in opts:
        options = opt(options)
    return options


def with_play() -> Option:
    """Include the review's `play` in the query."""
    return lambda opts: replace(opts, include_play=True)


def with_challenges() -> Option:
    """Fetch the track's challenges with a follow-up call."""
    return lambda opts: replace(opts, include_challenges=True)


def with_reviews() -> Option:
    """Fetch the track's reviews with a follow-up call."""
    return lambda opts: replace(opts, include_reviews=True)


def with_assignment() -> Option:
    return lambda opts: replace(opts, include_assignment=True)


def with_track_ids(*ids: str) -> Option:
    return lambda opts: replace(opts, track_ids=tuple(ids))


def with_track_invite_ids(*ids: str) -> Option:
    return lambda opts: replace(opts, track_invite_ids=tuple(ids))


def with_landing_page_ids(*ids: str) -> Option:
    return lambda opts: replace(opts, landing_page_ids=tuple(ids))


def with_tags(*tags: str) -> Option:
    return lambda opts: replace(opts, tags=tuple(tags))


def with_user_ids(*ids: str) -> Option:
    return lambda opts: replace(opts, user_ids=tuple(ids))


def with_play_type(play_type: PlayType) -> Option:
    play_type = PlayType(play_type)
    return lambda opts: replace(opts, play_type=play_type)


def with_ordering(order_by: OrderBy, direction: Direction) -> Option:
    ordering = Ordering(OrderBy(order_by), Direction(direction))
    return lambda opts: replace(opts, ordering=ordering)


def with_state(state: str) -> Option:
    return lambda opts: replace(opts, state=state)


def with_pool_ids(*ids: str) -> Option:
    return lambda opts: replace(opts, pool_ids=tuple(ids))
