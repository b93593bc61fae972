"""API reference built from the mounted routes and the live category list."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute

from routes.deps import get_storage
from stores import MemStorage

router = APIRouter(prefix="/api/docs", tags=["documentation"])


def describe_route(route: APIRoute) -> Dict[str, Any]:
    if route.summary:
        summary = route.summary
    elif route.description:
        summary = route.description.splitlines()[0]
    else:
        summary = route.name.replace("_", " ")
    return {"methods": sorted(route.methods), "path": route.path, "summary": summary}


def list_endpoints(routes) -> List[Dict[str, Any]]:
    """Every /api route, in mount order; OpenAPI and Swagger pages are skipped."""
    return [
        describe_route(r) for r in routes
        if isinstance(r, APIRoute) and r.path.startswith("/api")
    ]


def render_markdown(endpoints: List[Dict[str, Any]], categories: List[Dict[str, str]]) -> str:
    lines = ["# Desenrola Direito API", ""]
    for ep in endpoints:
        lines += [f"### {' '.join(ep['methods'])} {ep['path']}", "", ep["summary"], ""]
    lines += ["### Categorias", ""]
    lines += [f"- `{c['slug']}`: {c['name']}" for c in categories]
    return "\n".join(lines).rstrip() + "\n"


async def _category_index(storage: MemStorage) -> List[Dict[str, str]]:
    return [{"slug": c.slug, "name": c.name} for c in await storage.get_categories()]


@router.get("", response_class=PlainTextResponse, summary="API reference (Markdown)")
async def get_api_reference_markdown(request: Request, storage: MemStorage = Depends(get_storage)):
    text = render_markdown(list_endpoints(request.app.routes), await _category_index(storage))
    return PlainTextResponse(text, media_type="text/markdown; charset=utf-8")


@router.get("/structured", summary="API reference as structured JSON")
async def get_api_reference_structured(request: Request, storage: MemStorage = Depends(get_storage)):
    return {
        "title": "Desenrola Direito API",
        "endpoints": list_endpoints(request.app.routes),
        "categories": await _category_index(storage),
    }
