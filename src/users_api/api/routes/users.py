"""
User resource API routes
Each handler maps one HTTP method/path pair onto a single UserStore call.
Path IDs and bodies are decoded by dependencies; decode failures surface as
400 through the central validation handler.
"""

from typing import List
from fastapi import APIRouter, HTTPException, Depends, Response

from users_api.api.dependencies import get_user_store, parse_user_id, read_user_payload
from users_api.models.user import User, UserPayload
from users_api.services.user_store import UserStore

router = APIRouter()

# Both slash forms are registered; the app does not redirect between them

@router.get("", response_model=List[User])
@router.get("/", response_model=List[User], include_in_schema=False)
def list_users(store: UserStore = Depends(get_user_store)):
    """List all users (possibly empty)"""
    return store.list_users()

@router.post("", response_model=User, status_code=201)
@router.post("/", response_model=User, status_code=201, include_in_schema=False)
def create_user(
    payload: UserPayload = Depends(read_user_payload),
    store: UserStore = Depends(get_user_store)
):
    """Create a user; the ID is assigned by the store"""
    return store.create(payload.name, payload.email)

@router.get("/{user_id}", response_model=User)
@router.get("/{user_id}/", response_model=User, include_in_schema=False)
def get_user(user_id: int = Depends(parse_user_id), store: UserStore = Depends(get_user_store)):
    """Get a user by ID"""
    user = store.get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.put("/{user_id}", response_model=User)
@router.put("/{user_id}/", response_model=User, include_in_schema=False)
def update_user(
    user_id: int = Depends(parse_user_id),
    payload: UserPayload = Depends(read_user_payload),
    store: UserStore = Depends(get_user_store)
):
    """Replace name and email of a user, keeping its ID"""
    user = store.update(user_id, payload.name, payload.email)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.delete("/{user_id}", status_code=204, response_class=Response)
@router.delete("/{user_id}/", status_code=204, response_class=Response, include_in_schema=False)
def delete_user(user_id: int = Depends(parse_user_id), store: UserStore = Depends(get_user_store)):
    """Delete a user"""
    if not store.delete(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return Response(status_code=204)
