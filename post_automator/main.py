"""FastAPI application: lifecycle and routes."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from post_automator.services.gemini_service import GeminiGateway
from post_automator.session import AppSession, set_session
from post_automator.utils.logging import get_logger, setup_logging
from post_automator.routes import articles_router, generate_router, share_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging and the session. Without GEMINI_API_KEY the gateway raises and startup aborts."""
    setup_logging()
    gateway = GeminiGateway()
    set_session(AppSession(gateway))
    logger.info("app_started", model=gateway.model)
    yield
    set_session(None)


app = FastAPI(
    title="AI Social Post Automator",
    description="Generate social media posts for your blog articles",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(articles_router)
app.include_router(generate_router)
app.include_router(share_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
