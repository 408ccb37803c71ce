"""
Application Use Cases for the Locked API.

Use cases orchestrate several ports to perform one business operation.
Single-store operations are called on the repositories directly.

Usage:
    from application.use_cases import GetFeedUseCase, PublishPostUseCase

    feed = GetFeedUseCase(post_repo=post_repo, follow_repo=follow_repo)
    result = await feed.execute("user-123", limit=50)

    publish = PublishPostUseCase(photo_repo=photo_repo, post_repo=post_repo)
    result = await publish.execute("user-123", "/tmp/photo.jpg", "leg day")
"""

from application.use_cases.get_feed import FEED_CHUNK_SIZE, GetFeedUseCase, chunked
from application.use_cases.publish_post import PublishPostUseCase

__all__ = [
    # GetFeed
    "GetFeedUseCase",
    "FEED_CHUNK_SIZE",
    "chunked",
    # PublishPost
    "PublishPostUseCase",
]
