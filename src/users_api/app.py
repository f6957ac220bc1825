"""
User Resource Server
CRUD over an in-memory User store, behind a permissive CORS layer.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI

from users_api import __version__
from users_api.config.settings import ENV
from users_api.api.routes import health, users
from users_api.middleware.cors import PermissiveCORSMiddleware
from users_api.services.user_store import UserStore
from users_api.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(f"User resource server starting (env={ENV})")
    yield
    logger.info(f"User resource server stopped with {app.state.user_store.count()} users in memory")

def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        store: Store to serve; a fresh empty one is created when omitted

    Returns:
        Configured FastAPI app owning the store on `app.state.user_store`
    """
    app = FastAPI(
        title="User Resource Server",
        description="In-memory CRUD API for users",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False
    )

    app.state.user_store = store if store is not None else UserStore()

    # Error handling sits inside CORS so error responses get CORS headers too
    setup_error_handling(app)

    # Added last, so outermost
    app.add_middleware(PermissiveCORSMiddleware)

    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix="/users", tags=["Users"])

    return app

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
