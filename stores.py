# stores.py
# In-memory storage for users, categories, articles and solutions.
# One MemStorage instance per process; routes reach it through routes.deps.

from typing import Dict, List, Optional, Protocol

import structlog

from models import (
    Article,
    ArticleWithCategory,
    Category,
    InsertArticle,
    InsertCategory,
    InsertSolution,
    InsertUser,
    Solution,
    User,
)
from utils import contains_ci

logger = structlog.get_logger("storage")


# ----------------------------
# Errors
# ----------------------------

class StorageError(Exception):
    """Base class for write-side storage failures."""


class DuplicateKeyError(StorageError):
    def __init__(self, kind: str, field: str, value: str):
        super().__init__(f"{kind} with {field}={value!r} already exists")
        self.kind = kind
        self.field = field
        self.value = value


class CategoryNotFoundError(StorageError):
    def __init__(self, category_id: int):
        super().__init__(f"category {category_id} does not exist")
        self.category_id = category_id


# ----------------------------
# Identifier allocation
# ----------------------------

ENTITY_KINDS = ("user", "category", "article", "solution")


class IdAllocator:
    """One counter per entity kind, starting at 1 and never reused."""

    def __init__(self, kinds=ENTITY_KINDS):
        self._next: Dict[str, int] = {k: 1 for k in kinds}

    def next(self, kind: str) -> int:
        value = self._next[kind]
        self._next[kind] = value + 1
        return value

    def peek(self, kind: str) -> int:
        return self._next[kind]


# ----------------------------
# Storage contract
# ----------------------------

class IStorage(Protocol):
    async def get_user(self, user_id: int) -> Optional[User]: ...
    async def get_user_by_username(self, username: str) -> Optional[User]: ...
    async def create_user(self, data: InsertUser) -> User: ...

    async def get_categories(self) -> List[Category]: ...
    async def get_category_by_slug(self, slug: str) -> Optional[Category]: ...
    async def get_category_by_id(self, category_id: int) -> Optional[Category]: ...
    async def create_category(self, data: InsertCategory) -> Category: ...

    async def get_articles(self) -> List[ArticleWithCategory]: ...
    async def get_article_by_slug(self, slug: str) -> Optional[ArticleWithCategory]: ...
    async def get_article_by_id(self, article_id: int) -> Optional[ArticleWithCategory]: ...
    async def get_articles_by_category(self, category_slug: str) -> List[ArticleWithCategory]: ...
    async def get_featured_articles(self) -> List[ArticleWithCategory]: ...
    async def get_recent_articles(self, limit: int) -> List[ArticleWithCategory]: ...
    async def search_articles(self, query: str) -> List[ArticleWithCategory]: ...
    async def create_article(self, data: InsertArticle) -> Article: ...

    async def get_solutions(self) -> List[Solution]: ...
    async def create_solution(self, data: InsertSolution) -> Solution: ...


class MemStorage:
    """
    Process-lifetime store backed by plain dicts (id -> record).

    Every method is a coroutine that never suspends, so the class can be
    swapped for a networked backend implementing IStorage. Reads hand out
    deep copies; stored records are only touched by the create_* methods.
    """

    def __init__(self, enforce_unique_keys: bool = False, strict_category_refs: bool = True):
        self.users: Dict[int, User] = {}
        self.categories: Dict[int, Category] = {}
        self.articles: Dict[int, Article] = {}
        self.solutions: Dict[int, Solution] = {}
        self.ids = IdAllocator()
        self.enforce_unique_keys = enforce_unique_keys
        self.strict_category_refs = strict_category_refs

    # --- helpers

    def _check_unique(self, kind: str, records: Dict[int, object], field: str, value: str) -> None:
        if not self.enforce_unique_keys:
            return
        if any(getattr(r, field) == value for r in records.values()):
            raise DuplicateKeyError(kind, field, value)

    def _join(self, article: Article) -> Optional[ArticleWithCategory]:
        category = self.categories.get(article.category_id)
        if category is None:
            logger.warning(
                "Article references a missing category",
                article_id=article.id,
                category_id=article.category_id,
            )
            return None
        return ArticleWithCategory(
            **article.model_dump(),
            category=category.model_copy(deep=True),
        )

    def _join_all(self, articles: List[Article]) -> List[ArticleWithCategory]:
        joined = (self._join(a) for a in articles)
        return [a for a in joined if a is not None]

    def _by_date_desc(self) -> List[Article]:
        # sorted() is stable with reverse=True, ties keep insertion order
        return sorted(self.articles.values(), key=lambda a: a.publish_date, reverse=True)

    # ----------------------------
    # Users
    # ----------------------------

    async def get_user(self, user_id: int) -> Optional[User]:
        user = self.users.get(user_id)
        return user.model_copy(deep=True) if user else None

    async def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return user.model_copy(deep=True)
        return None

    async def create_user(self, data: InsertUser) -> User:
        self._check_unique("user", self.users, "username", data.username)
        user = User(id=self.ids.next("user"), **data.model_dump())
        self.users[user.id] = user
        logger.debug("User created", user_id=user.id)
        return user.model_copy(deep=True)

    # ----------------------------
    # Categories
    # ----------------------------

    async def get_categories(self) -> List[Category]:
        return [c.model_copy(deep=True) for c in self.categories.values()]

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        for category in self.categories.values():
            if category.slug == slug:
                return category.model_copy(deep=True)
        return None

    async def get_category_by_id(self, category_id: int) -> Optional[Category]:
        category = self.categories.get(category_id)
        return category.model_copy(deep=True) if category else None

    async def create_category(self, data: InsertCategory) -> Category:
        self._check_unique("category", self.categories, "slug", data.slug)
        category = Category(id=self.ids.next("category"), **data.model_dump())
        self.categories[category.id] = category
        logger.debug("Category created", category_id=category.id, slug=category.slug)
        return category.model_copy(deep=True)

    # ----------------------------
    # Articles
    # ----------------------------

    async def get_articles(self) -> List[ArticleWithCategory]:
        return self._join_all(list(self.articles.values()))

    async def get_article_by_slug(self, slug: str) -> Optional[ArticleWithCategory]:
        for article in self.articles.values():
            if article.slug == slug:
                return self._join(article)
        return None

    async def get_article_by_id(self, article_id: int) -> Optional[ArticleWithCategory]:
        article = self.articles.get(article_id)
        return self._join(article) if article else None

    async def get_articles_by_category(self, category_slug: str) -> List[ArticleWithCategory]:
        category = await self.get_category_by_slug(category_slug)
        if category is None:
            return []
        return self._join_all([a for a in self.articles.values() if a.category_id == category.id])

    async def get_featured_articles(self) -> List[ArticleWithCategory]:
        return self._join_all([a for a in self._by_date_desc() if a.featured])

    async def get_recent_articles(self, limit: int) -> List[ArticleWithCategory]:
        if limit < 0:
            raise ValueError("limit must be >= 0")
        # Join first so a dangling article does not eat a slot
        return self._join_all(self._by_date_desc())[:limit]

    async def search_articles(self, query: str) -> List[ArticleWithCategory]:
        hits = [
            a for a in self.articles.values()
            if contains_ci(a.title, query) or contains_ci(a.excerpt, query) or contains_ci(a.content, query)
        ]
        return self._join_all(hits)

    async def create_article(self, data: InsertArticle) -> Article:
        self._check_unique("article", self.articles, "slug", data.slug)
        if self.strict_category_refs and data.category_id not in self.categories:
            raise CategoryNotFoundError(data.category_id)
        article = Article(id=self.ids.next("article"), **data.model_dump())
        self.articles[article.id] = article
        logger.debug("Article created", article_id=article.id, slug=article.slug)
        return article.model_copy(deep=True)

    # ----------------------------
    # Solutions
    # ----------------------------

    async def get_solutions(self) -> List[Solution]:
        return [s.model_copy(deep=True) for s in self.solutions.values()]

    async def create_solution(self, data: InsertSolution) -> Solution:
        solution = Solution(id=self.ids.next("solution"), **data.model_dump())
        self.solutions[solution.id] = solution
        logger.debug("Solution created", solution_id=solution.id)
        return solution.model_copy(deep=True)
