"""GraphQL selection sets shared by the resource queries.

Selections that depend on options are built by functions; documents using
`USER` must declare a `$teamSlug: String!` variable.
"""

TRACK = """
    id
    slug
    icon
    title
    description
    teaser
    level
    embed_token
    createdAt
    deletedAt
    last_update
    statistics { average_review_score }
    trackTags { value }
"""

SANDBOX_CONFIG = """
    id
    name
    slug
    version
    deleted
"""

SANDBOX_TRACK = (
    TRACK
    + """
    status
    started
    completed
    participant { id }
    sandboxConfig {
        id
        version
        description
        status
        published_at
        config {"""
    + SANDBOX_CONFIG
    + """}
    }
"""
)

TRACK_INVITE = """
    id
    publicTitle
    runtimeParameters {
        environmentVariables { key value }
    }
    claims {
        id
        user { id }
        claimedAt
    }
"""

USER = """
    id
    details(teamSlug: $teamSlug) {
        firstName
        lastName
        email
        companyName
        jobTitle
        jobLevel
        jobFunction
        consent
    }
    profile {
        display_name
        email
    }
"""

_POOL_EDGE_COUNTS = """
        claimed
        available
        created
        failed
        creating
        total
"""

HOT_START_POOL = (
    """
    id
    type
    size
    created
    deleted
    name
    auto_refill
    starts_at
    ends_at
    status
    region
    configs {"""
    + _POOL_EDGE_COUNTS
    + "        node {"
    + SANDBOX_CONFIG
    + """}
    }
    tracks {"""
    + _POOL_EDGE_COUNTS
    + "        node {"
    + TRACK
    + """}
    }
"""
)


def challenge(include_assignment: bool = False) -> str:
    fields = """
    id
    slug
    title
    teaser
    index
    status
    track { id }
    attempts { message timestamp }
"""
    if include_assignment:
        fields += "    assignment\n"
    return fields


def review(include_play: bool = False) -> str:
    fields = """
    id
    score
    content
    created_at
    updated_at
"""
    if include_play:
        fields += "    play { id startedAt }\n"
    return fields
