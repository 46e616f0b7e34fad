"""Tests for the locked in-memory document store."""

import asyncio

import pytest

from core.domain import Document


@pytest.mark.asyncio
async def test_add_preserves_order_and_drops_duplicates(store):
    names = await store.add_documents([
        Document("b.txt", "one"),
        Document("a.txt", "two"),
        Document("b.txt", "three"),
    ])
    assert names == ["b.txt", "a.txt"]

    names = await store.add_documents([Document("a.txt", "four"), Document("c.txt", "five")])
    assert names == ["b.txt", "a.txt", "c.txt"]

    async with store.read() as snapshot:
        assert snapshot.documents[0] == Document("b.txt", "one")


@pytest.mark.asyncio
async def test_clear_is_idempotent_and_keeps_terms(store):
    await store.add_documents([Document("a.txt", "cat")])
    await store.set_terms(["cat"])

    await store.clear()
    assert await store.count() == 0
    await store.clear()
    assert await store.list_names() == []

    async with store.read() as snapshot:
        assert snapshot.terms == ("cat",)


@pytest.mark.asyncio
async def test_writes_wait_for_readers(store):
    await store.add_documents([Document("a.txt", "cat")])

    async with store.read() as snapshot:
        writer = asyncio.create_task(store.add_documents([Document("b.txt", "dog")]))
        await asyncio.sleep(0)
        assert not writer.done()
        assert [doc.name for doc in snapshot.documents] == ["a.txt"]

    assert await writer == ["a.txt", "b.txt"]
