"""
Shared FastAPI dependencies
"""

from fastapi import Path, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from users_api.models.user import UserPayload
from users_api.services.user_store import UserStore

def get_user_store(request: Request) -> UserStore:
    """Store owned by the application root (see app.create_app)"""
    return request.app.state.user_store

def parse_user_id(user_id: str = Path(..., pattern=r"^[+-]?[0-9]+$")) -> int:
    """Path ID as a strict base-10 integer literal ("1.0" and " 1" are rejected)"""
    return int(user_id)

async def read_user_payload(request: Request) -> UserPayload:
    """
    Decode the request body as a UserPayload

    The body is read as JSON whatever the Content-Type header says, so a
    plain `curl -d` works. Decode failures become a body validation error
    and are answered with 400 by the central handler.
    """
    body = await request.body()
    try:
        return UserPayload.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error.get("loc", ()))} for error in e.errors()]
        )
