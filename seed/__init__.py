"""Startup data: category catalog, solution cards and built-in articles."""
from .core import (
    ArticleSeed,
    SeedReport,
    ARTICLE_SEEDS,
    register_article,
    load_builtin_articles,
    seed_storage,
)
from .catalog import CATEGORY_SEEDS, SOLUTION_SEEDS

load_builtin_articles()


async def seed_default(storage) -> SeedReport:
    """Seed a store with the built-in catalog."""
    return await seed_storage(storage, CATEGORY_SEEDS, ARTICLE_SEEDS, SOLUTION_SEEDS)


__all__ = [
    "ArticleSeed",
    "SeedReport",
    "ARTICLE_SEEDS",
    "CATEGORY_SEEDS",
    "SOLUTION_SEEDS",
    "register_article",
    "load_builtin_articles",
    "seed_storage",
    "seed_default",
]
