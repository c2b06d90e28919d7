"""Tests for InMemorySessionStore."""

import pytest

from multistream.domain.live.session.session_store import SessionStore, SessionStoreError
from multistream.services.session_store import InMemorySessionStore


async def _add_output(store: InMemorySessionStore, session_id: str, categories: list[str]) -> int:
    return await store.add_output(
        session_id, "out", "rtmp", "rtmp://host/live", "key", 4500, categories
    )


class TestInMemorySessionStore:
    def test_satisfies_protocol(self, memory_store):
        assert isinstance(memory_store, SessionStore)

    async def test_create_and_get(self, memory_store):
        await memory_store.create_session("s1", "Title")

        session = await memory_store.get_session("s1")

        assert session.id == "s1"
        assert session.title == "Title"
        assert session.outputs == []
        assert session.is_active is False

    async def test_duplicate_session_id(self, memory_store):
        await memory_store.create_session("s1", "Title")

        with pytest.raises(SessionStoreError) as exc_info:
            await memory_store.create_session("s1", "Again")

        assert exc_info.value.operation == "create_session"

    @pytest.mark.parametrize(
        "operation, args",
        [
            ("get_session", ("missing",)),
            ("set_video_source", ("missing", "https://v")),
            ("start_session", ("missing",)),
            ("get_output", (99,)),
            ("get_layer", (99,)),
        ],
    )
    async def test_unknown_ids(self, memory_store, operation, args):
        with pytest.raises(SessionStoreError) as exc_info:
            await getattr(memory_store, operation)(*args)

        assert exc_info.value.operation == operation

    async def test_output_ids_are_sequential(self, memory_store):
        await memory_store.create_session("s1", "Title")

        first = await _add_output(memory_store, "s1", ["youtube"])
        second = await _add_output(memory_store, "s1", ["twitch"])

        assert (first, second) == (1, 2)
        assert (await memory_store.get_session("s1")).outputs == [1, 2]

    async def test_list_outputs_by_category(self, memory_store):
        await memory_store.create_session("s1", "Title")
        youtube_id = await _add_output(memory_store, "s1", ["youtube", "live"])
        await _add_output(memory_store, "s1", ["other"])

        outputs = await memory_store.list_outputs_by_category("live")

        assert [o.id for o in outputs] == [youtube_id]

    async def test_active_sessions(self, memory_store):
        await memory_store.create_session("s1", "One")
        await memory_store.create_session("s2", "Two")
        await memory_store.start_session("s2")

        assert [s.id for s in await memory_store.list_active_sessions()] == ["s2"]

    async def test_returned_models_are_copies(self, memory_store):
        await memory_store.create_session("s1", "Title")

        session = await memory_store.get_session("s1")
        session.title = "Changed"
        session.outputs.append(42)

        stored = await memory_store.get_session("s1")
        assert stored.title == "Title"
        assert stored.outputs == []
