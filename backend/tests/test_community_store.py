from __future__ import annotations

import asyncio
import logging
from datetime import timezone

import pytest
from sqlalchemy.exc import OperationalError

from conftest import FakeDB
from toneswap.core.errors import PersistenceError
from toneswap.repos.transformation_repo import TransformationRepo
from toneswap.services.community_store import CommunityStore
from toneswap.services.tone_catalog import Tone


def test_append_stores_row_with_id_and_utc_timestamp(fake_db):
    store = CommunityStore(fake_db)
    row = asyncio.run(store.append(original_text="hi", transformed_text="ahoy", tone=Tone.pirate))

    assert row.id == 1
    assert (row.original_text, row.transformed_text, row.tone) == ("hi", "ahoy", "pirate")
    assert row.created_at.tzinfo == timezone.utc
    assert fake_db.rows == [row]


def test_append_failure_raises_persistence_error(caplog):
    db = FakeDB(fail=OperationalError("INSERT", {}, Exception("connection refused")))
    store = CommunityStore(db)
    with caplog.at_level(logging.WARNING, logger="toneswap.services.community_store"):
        with pytest.raises(PersistenceError):
            asyncio.run(store.append(original_text="hi", transformed_text="ahoy", tone=Tone.pirate))
    assert "append failed tone=pirate" in caplog.text


def test_list_recent_caps_at_fifty_and_orders_newest_first(fake_db):
    fake_db.seed(60)
    rows = asyncio.run(CommunityStore(fake_db).list_recent(50))

    assert len(rows) == 50
    assert all(rows[i].created_at >= rows[i + 1].created_at for i in range(len(rows) - 1))
    assert rows[0].original_text == "original 59"


@pytest.mark.parametrize("asked,expected", [(None, 50), (500, 50), (2, 2), (0, 1), (-3, 1)])
def test_list_recent_clamps_limit(fake_db, asked, expected):
    fake_db.seed(60)
    rows = asyncio.run(CommunityStore(fake_db).list_recent(asked))
    assert len(rows) == expected


def test_configured_cap_never_exceeds_fifty(fake_db):
    fake_db.seed(80)
    store = CommunityStore(fake_db, max_limit=100)
    assert store.max_limit == 50
    assert len(asyncio.run(store.list_recent(100))) == 50


def test_list_recent_returns_empty_when_store_unreachable(caplog):
    db = FakeDB(fail=ConnectionRefusedError("db down"))
    with caplog.at_level(logging.WARNING, logger="toneswap.services.community_store"):
        rows = asyncio.run(CommunityStore(db).list_recent())
    assert rows == []
    assert "list_recent failed" in caplog.text


def test_repo_query_orders_by_created_at_desc_with_limit(fake_db):
    async def run():
        async with fake_db() as session:
            return await TransformationRepo(session).list_recent(50)

    asyncio.run(run())
    stmt = fake_db.statements[-1]
    sql = str(stmt.compile(compile_kwargs={"literal_binds": True}))
    assert "ORDER BY transformations.created_at DESC, transformations.id DESC" in sql
    assert "LIMIT 50" in sql


def test_configured_cap_below_fifty_wins_over_requested_limit(fake_db):
    fake_db.seed(40)
    store = CommunityStore(fake_db, max_limit=20)

    assert len(asyncio.run(store.list_recent(30))) == 20
    assert len(asyncio.run(store.list_recent(None))) == 20
