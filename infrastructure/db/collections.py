"""Document paths (schema-in-code).

The document store has no DDL or migrations: collections appear when the first
document is written. These builders are the single source of truth for the
layout shared with the mobile clients:

    users/{userId}
    users/{userId}/follows/{targetId}
    users/{userId}/followers/{sourceId}
    users/{userId}/workouts/{workoutId}
    users/{userId}/workouts/{workoutId}/exercises/{exerciseId}
    posts/{postId}
    posts/{postId}/likes/{likerId}
    posts/{postId}/comments/{commentId}
    posts/{postId}/comments/{commentId}/likes/{likerId}
"""

COLLECTION_USERS = "users"
COLLECTION_POSTS = "posts"
COLLECTION_FOLLOWS = "follows"
COLLECTION_FOLLOWERS = "followers"
COLLECTION_WORKOUTS = "workouts"
COLLECTION_EXERCISES = "exercises"
COLLECTION_LIKES = "likes"
COLLECTION_COMMENTS = "comments"


def user_doc(user_id: str) -> str:
    return f"{COLLECTION_USERS}/{user_id}"


def follows_collection(user_id: str) -> str:
    return f"{user_doc(user_id)}/{COLLECTION_FOLLOWS}"


def followers_collection(user_id: str) -> str:
    return f"{user_doc(user_id)}/{COLLECTION_FOLLOWERS}"


def follows_doc(me: str, target: str) -> str:
    return f"{follows_collection(me)}/{target}"


def followers_doc(target: str, me: str) -> str:
    return f"{followers_collection(target)}/{me}"


def workouts_collection(user_id: str) -> str:
    return f"{user_doc(user_id)}/{COLLECTION_WORKOUTS}"


def workout_doc(user_id: str, workout_id: str) -> str:
    return f"{workouts_collection(user_id)}/{workout_id}"


def exercises_collection(user_id: str, workout_id: str) -> str:
    return f"{workout_doc(user_id, workout_id)}/{COLLECTION_EXERCISES}"


def post_doc(post_id: str) -> str:
    return f"{COLLECTION_POSTS}/{post_id}"


def post_likes_collection(post_id: str) -> str:
    return f"{post_doc(post_id)}/{COLLECTION_LIKES}"


def post_comments_collection(post_id: str) -> str:
    return f"{post_doc(post_id)}/{COLLECTION_COMMENTS}"


def comment_doc(post_id: str, comment_id: str) -> str:
    return f"{post_comments_collection(post_id)}/{comment_id}"


def comment_likes_collection(post_id: str, comment_id: str) -> str:
    return f"{comment_doc(post_id, comment_id)}/{COLLECTION_LIKES}"
