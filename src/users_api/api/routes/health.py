"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, Depends

from users_api.api.dependencies import get_user_store
from users_api.services.user_store import UserStore

router = APIRouter()

@router.get("/health")
def health_check(store: UserStore = Depends(get_user_store)):
    """Liveness check; also reports how many users are stored"""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "users": store.count()
    }
