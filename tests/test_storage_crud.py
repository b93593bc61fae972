import asyncio
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models import InsertArticle, InsertCategory, InsertSolution, InsertUser  # noqa: E402
from stores import CategoryNotFoundError, DuplicateKeyError, IdAllocator, MemStorage  # noqa: E402


def run(coro):
    return asyncio.run(coro)


def make_category(slug: str = "direito-consumidor", **extra) -> InsertCategory:
    return InsertCategory(name=slug.replace("-", " ").title(), slug=slug, **extra)


def make_article(category_id: int, slug: str = "artigo", **extra) -> InsertArticle:
    data = dict(
        title=f"Título {slug}",
        slug=slug,
        excerpt="Resumo",
        content="Conteúdo",
        publish_date=datetime(2024, 1, 1, 12, 0),
        category_id=category_id,
    )
    data.update(extra)
    return InsertArticle(**data)


def test_id_allocator_counts_each_kind_separately():
    ids = IdAllocator()
    assert [ids.next("user"), ids.next("user"), ids.next("user")] == [1, 2, 3]
    assert ids.next("article") == 1
    assert ids.peek("user") == 4
    assert ids.peek("solution") == 1


def test_ids_strictly_increase_per_kind():
    storage = MemStorage()
    cat_ids = [run(storage.create_category(make_category(f"c{i}"))).id for i in range(4)]
    sol = run(storage.create_solution(InsertSolution(title="t", description="d", link="/x", link_text="ver")))
    user = run(storage.create_user(InsertUser(username="ana", password="segredo")))

    assert cat_ids == [1, 2, 3, 4]
    assert sol.id == 1
    assert user.id == 1


def test_category_optional_fields_default_to_none():
    storage = MemStorage()
    category = run(storage.create_category(make_category()))

    assert category.description is None
    assert category.icon_name is None
    assert category.image_url is None


def test_article_defaults_and_featured_coercion():
    storage = MemStorage()
    cat = run(storage.create_category(make_category()))

    plain = run(storage.create_article(make_article(cat.id, "a")))
    flagged = run(storage.create_article(make_article(cat.id, "b", featured=1)))
    zero = run(storage.create_article(make_article(cat.id, "c", featured=0)))
    null = run(storage.create_article(make_article(cat.id, "d", featured=None)))

    assert plain.image_url is None
    assert plain.featured is False
    assert flagged.featured is True
    assert zero.featured is False
    assert null.featured is False


def test_article_round_trip_adds_only_id_and_category():
    storage = MemStorage()
    cat = run(storage.create_category(make_category()))
    data = make_article(cat.id, "round-trip", image_url="/img.jpg", featured=True)

    created = run(storage.create_article(data))
    fetched = run(storage.get_article_by_id(created.id))

    assert fetched is not None
    assert fetched.model_dump(exclude={"id", "category"}) == data.model_dump()
    assert fetched.id == created.id
    assert fetched.category == cat


def test_lookups_return_none_when_missing():
    storage = MemStorage()
    assert run(storage.get_user(1)) is None
    assert run(storage.get_user_by_username("ninguem")) is None
    assert run(storage.get_category_by_id(42)) is None
    assert run(storage.get_category_by_slug("nada")) is None
    assert run(storage.get_article_by_id(7)) is None
    assert run(storage.get_article_by_slug("nada")) is None


def test_username_lookup_is_case_sensitive():
    storage = MemStorage()
    run(storage.create_user(InsertUser(username="Maria", password="x")))

    assert run(storage.get_user_by_username("Maria")).username == "Maria"
    assert run(storage.get_user_by_username("maria")) is None


def test_duplicates_are_accepted_by_default():
    storage = MemStorage()
    first = run(storage.create_category(make_category("repetida")))
    second = run(storage.create_category(make_category("repetida")))

    assert second.id == first.id + 1
    assert len(run(storage.get_categories())) == 2
    # First match wins on slug lookup
    assert run(storage.get_category_by_slug("repetida")).id == first.id


def test_enforce_unique_keys_rejects_duplicates():
    storage = MemStorage(enforce_unique_keys=True)
    cat = run(storage.create_category(make_category("unica")))
    run(storage.create_article(make_article(cat.id, "artigo-unico")))
    run(storage.create_user(InsertUser(username="joao", password="x")))

    with pytest.raises(DuplicateKeyError):
        run(storage.create_category(make_category("unica")))
    with pytest.raises(DuplicateKeyError) as excinfo:
        run(storage.create_article(make_article(cat.id, "artigo-unico")))
    with pytest.raises(DuplicateKeyError):
        run(storage.create_user(InsertUser(username="joao", password="y")))

    assert excinfo.value.field == "slug"
    # Rejected creates do not burn ids
    assert storage.ids.peek("category") == 2
    assert storage.ids.peek("article") == 2


def test_unknown_category_rejected_without_consuming_id():
    storage = MemStorage()

    with pytest.raises(CategoryNotFoundError) as excinfo:
        run(storage.create_article(make_article(99)))

    assert excinfo.value.category_id == 99
    assert storage.ids.peek("article") == 1
    assert run(storage.get_articles()) == []


def test_dangling_reference_is_skipped_on_read():
    storage = MemStorage(strict_category_refs=False)
    cat = run(storage.create_category(make_category()))
    good = run(storage.create_article(make_article(cat.id, "ok")))
    orphan = run(storage.create_article(make_article(99, "orfao")))

    assert [a.id for a in run(storage.get_articles())] == [good.id]
    assert run(storage.get_article_by_id(orphan.id)) is None
    assert run(storage.get_article_by_slug("orfao")) is None
    assert run(storage.search_articles("orfao")) == []


def test_reads_hand_out_copies():
    storage = MemStorage()
    cat = run(storage.create_category(make_category()))
    run(storage.create_article(make_article(cat.id)))

    fetched = run(storage.get_category_by_id(cat.id))
    fetched.name = "alterado"
    joined = run(storage.get_articles())[0]
    joined.category.name = "alterado"
    joined.title = "alterado"

    assert run(storage.get_category_by_id(cat.id)).name == cat.name
    assert run(storage.get_articles())[0].title == "Título artigo"


def test_solutions_listed_in_creation_order():
    storage = MemStorage()
    for title in ("A", "B", "C"):
        run(storage.create_solution(InsertSolution(title=title, description="d", link="/", link_text="ir")))

    solutions = run(storage.get_solutions())
    assert [s.title for s in solutions] == ["A", "B", "C"]
    assert all(s.image_url is None for s in solutions)


def test_naive_and_offset_dates_sort_together():
    storage = MemStorage()
    cat = run(storage.create_category(make_category()))
    # 12:00 in Sao Paulo is 15:00 UTC
    run(storage.create_article(make_article(cat.id, "local-noon", publish_date=datetime(2024, 1, 1, 12, 0), featured=True)))
    run(storage.create_article(make_article(
        cat.id, "utc-1400", publish_date=datetime(2024, 1, 1, 14, 0, tzinfo=timezone.utc), featured=True,
    )))
    run(storage.create_article(make_article(
        cat.id, "utc-1600", publish_date=datetime(2024, 1, 1, 16, 0, tzinfo=timezone.utc), featured=True,
    )))

    expected = ["utc-1600", "local-noon", "utc-1400"]
    assert [a.slug for a in run(storage.get_recent_articles(10))] == expected
    assert [a.slug for a in run(storage.get_featured_articles())] == expected
    assert all(a.publish_date.utcoffset() is not None for a in run(storage.get_articles()))
