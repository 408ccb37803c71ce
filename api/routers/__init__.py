"""
Router package for the Locked API.

This package contains all API routers organized by domain:
- health: Liveness and readiness endpoints
- posts: Posts, likes, comments and comment likes
- feed: Home feed
- follows: Follow graph
- users: User profiles and daily post status
- workouts: Workouts and exercises
- photos: Photo uploads and photo post publishing
"""

from api.routers.health import router as health_router
from api.routers.posts import router as posts_router
from api.routers.feed import router as feed_router
from api.routers.follows import router as follows_router
from api.routers.users import router as users_router
from api.routers.workouts import router as workouts_router
from api.routers.photos import router as photos_router

__all__ = [
    "health_router",
    "posts_router",
    "feed_router",
    "follows_router",
    "users_router",
    "workouts_router",
    "photos_router",
]
