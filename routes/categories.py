from fastapi import APIRouter, Depends, HTTPException

from routes.deps import get_storage
from stores import MemStorage

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("")
async def list_categories(storage: MemStorage = Depends(get_storage)):
    return {"ok": True, "items": await storage.get_categories()}


@router.get("/{slug}")
async def get_category(slug: str, storage: MemStorage = Depends(get_storage)):
    category = await storage.get_category_by_slug(slug)
    if not category:
        raise HTTPException(status_code=404, detail="category not found")
    return {"ok": True, "item": category}


@router.get("/{slug}/articles")
async def list_category_articles(slug: str, storage: MemStorage = Depends(get_storage)):
    # Unknown slug is an empty listing, not a 404
    return {"ok": True, "items": await storage.get_articles_by_category(slug)}
