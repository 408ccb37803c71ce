"""
Domain converters between stored documents and domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import document_to_post
    >>> post = document_to_post("p1", {"caption": "hi", "ownerUserId": "u1"})
    >>> post.photo_url
    ''
"""

from domain.converters.document_converters import (
    as_utc,
    document_to_comment,
    document_to_exercise,
    document_to_post,
    document_to_user,
    document_to_workout,
    exercise_to_document,
)

__all__ = [
    "as_utc",
    "document_to_comment",
    "document_to_exercise",
    "document_to_post",
    "document_to_user",
    "document_to_workout",
    "exercise_to_document",
]
