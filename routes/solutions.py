from fastapi import APIRouter, Depends

from routes.deps import get_storage
from stores import MemStorage

router = APIRouter(prefix="/api/solutions", tags=["solutions"])


@router.get("")
async def list_solutions(storage: MemStorage = Depends(get_storage)):
    return {"ok": True, "items": await storage.get_solutions()}
