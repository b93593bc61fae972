# /models.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator

from utils import as_sao_paulo


# ----------------------------
# Users
# ----------------------------

class InsertUser(BaseModel):
    username: str
    password: str  # stored as-is, no hashing at this layer


class User(InsertUser):
    id: int


class PublicUser(BaseModel):
    # What the API is allowed to echo back
    id: int
    username: str


# ----------------------------
# Categories
# ----------------------------

class InsertCategory(BaseModel):
    name: str
    slug: str
    description: Optional[str] = None
    icon_name: Optional[str] = None  # lucide icon name used by the front
    image_url: Optional[str] = None


class Category(InsertCategory):
    id: int


# ----------------------------
# Articles
# ----------------------------

class InsertArticle(BaseModel):
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: Optional[str] = None
    publish_date: datetime
    category_id: int
    featured: bool = False  # 1/0 coerce to True/False, null means False

    @field_validator("publish_date")
    @classmethod
    def _aware_publish_date(cls, v: datetime) -> datetime:
        # Naive and aware datetimes cannot be ordered together
        return as_sao_paulo(v)

    @field_validator("featured", mode="before")
    @classmethod
    def _null_not_featured(cls, v):
        return False if v is None else v


class Article(InsertArticle):
    id: int


class ArticleWithCategory(Article):
    # Read-side view, rebuilt on every query
    category: Category


# ----------------------------
# Solutions
# ----------------------------

class InsertSolution(BaseModel):
    title: str
    description: str
    image_url: Optional[str] = None
    link: str
    link_text: str


class Solution(InsertSolution):
    id: int
