"""Seed registry and the startup seeding routine."""
from __future__ import annotations

from datetime import datetime
from importlib import import_module
import pkgutil
from typing import Dict, List

import structlog
from pydantic import BaseModel, field_validator

from models import InsertArticle, InsertCategory, InsertSolution
from stores import IStorage

logger = structlog.get_logger("seed")


class ArticleSeed(BaseModel):
    # Article fields minus category_id; the category is named by slug and
    # resolved to a fresh id while seeding.
    category_slug: str
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: str | None = None
    publish_date: datetime
    featured: bool = False

    @field_validator("featured", mode="before")
    @classmethod
    def _null_not_featured(cls, v):
        return False if v is None else v

    def to_insert(self, category_id: int) -> InsertArticle:
        data = self.model_dump(exclude={"category_slug"})
        return InsertArticle(category_id=category_id, **data)


class SeedReport(BaseModel):
    categories: int = 0
    articles: int = 0
    solutions: int = 0


ARTICLE_SEEDS: List[ArticleSeed] = []


def register_article(seed: ArticleSeed) -> None:
    ARTICLE_SEEDS.append(seed)


_loaded_builtin_articles = False


def load_builtin_articles() -> None:
    global _loaded_builtin_articles
    if _loaded_builtin_articles:
        return

    package_name = f"{__package__}.articles"
    package = import_module(package_name)

    names = sorted(m.name for m in pkgutil.iter_modules(package.__path__))  # type: ignore[attr-defined]
    for name in names:
        if name.startswith("_"):
            continue
        import_module(f"{package_name}.{name}")

    _loaded_builtin_articles = True


async def seed_storage(
    storage: IStorage,
    categories: List[InsertCategory],
    articles: List[ArticleSeed],
    solutions: List[InsertSolution],
) -> SeedReport:
    """
    Fill an empty store: categories first so articles can point at their
    fresh ids, then articles, then solutions.
    Running it twice duplicates every record under new ids.
    """
    report = SeedReport()

    slug_to_id: Dict[str, int] = {}
    for data in categories:
        created = await storage.create_category(data)
        slug_to_id[created.slug] = created.id
        report.categories += 1

    for seed in articles:
        category_id = slug_to_id.get(seed.category_slug)
        if category_id is None:
            raise KeyError(f"article {seed.slug!r} names unknown category {seed.category_slug!r}")
        await storage.create_article(seed.to_insert(category_id))
        report.articles += 1

    for data in solutions:
        await storage.create_solution(data)
        report.solutions += 1

    logger.info("Storage seeded", **report.model_dump())
    return report


__all__ = [
    "ArticleSeed",
    "SeedReport",
    "ARTICLE_SEEDS",
    "register_article",
    "load_builtin_articles",
    "seed_storage",
]
