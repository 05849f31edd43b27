"""API route modules."""
from post_automator.routes.articles import router as articles_router
from post_automator.routes.generate import router as generate_router
from post_automator.routes.share import router as share_router

__all__ = [
    "articles_router",
    "generate_router",
    "share_router",
]
