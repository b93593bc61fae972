from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from models import InsertArticle
from routes.deps import get_settings, get_storage
from stores import CategoryNotFoundError, DuplicateKeyError, MemStorage

router = APIRouter(prefix="/api/articles", tags=["articles"])

# Path segments that shadow GET /{slug}
RESERVED_SLUGS = {"featured", "recent"}


@router.get("")
async def list_articles(q: Optional[str] = None, storage: MemStorage = Depends(get_storage)):
    """All articles, or the ones matching ``q`` in title/excerpt/content."""
    if q is None:
        items = await storage.get_articles()
    else:
        items = await storage.search_articles(q)
    return {"ok": True, "items": items}


@router.get("/featured")
async def list_featured(storage: MemStorage = Depends(get_storage)):
    return {"ok": True, "items": await storage.get_featured_articles()}


@router.get("/recent")
async def list_recent(
    limit: Optional[int] = Query(default=None, ge=0),
    storage: MemStorage = Depends(get_storage),
    settings=Depends(get_settings),
):
    if limit is None:
        limit = settings.recent_articles_default
    return {"ok": True, "items": await storage.get_recent_articles(limit)}


@router.get("/by-id/{article_id}")
async def get_article_by_id(article_id: int, storage: MemStorage = Depends(get_storage)):
    article = await storage.get_article_by_id(article_id)
    if not article:
        raise HTTPException(status_code=404, detail="article not found")
    return {"ok": True, "item": article}


@router.get("/{slug}")
async def get_article(slug: str, storage: MemStorage = Depends(get_storage)):
    article = await storage.get_article_by_slug(slug)
    if not article:
        raise HTTPException(status_code=404, detail="article not found")
    return {"ok": True, "item": article}


@router.post("", status_code=201)
async def create_article(body: InsertArticle = Body(...), storage: MemStorage = Depends(get_storage)):
    if body.slug in RESERVED_SLUGS:
        raise HTTPException(status_code=422, detail=f"slug {body.slug!r} is reserved")
    try:
        article = await storage.create_article(body)
    except DuplicateKeyError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except CategoryNotFoundError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"ok": True, "item": article}
