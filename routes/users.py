from fastapi import APIRouter, Body, Depends, HTTPException

from models import InsertUser, PublicUser
from routes.deps import get_storage
from stores import DuplicateKeyError, MemStorage

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", status_code=201)
async def create_user(body: InsertUser = Body(...), storage: MemStorage = Depends(get_storage)):
    try:
        user = await storage.create_user(body)
    except DuplicateKeyError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    # Never echo the password back
    return {"ok": True, "item": PublicUser(id=user.id, username=user.username)}


@router.get("/{user_id}")
async def get_user(user_id: int, storage: MemStorage = Depends(get_storage)):
    user = await storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="user not found")
    return {"ok": True, "item": PublicUser(id=user.id, username=user.username)}
