"""In-Memory Store — ordering, id assignment and lock-guarded concurrency.

Tests cover:
    - ids start at 1 and increase
    - ids are not reused after deleting the newest item
    - returned items are copies
    - concurrent creates produce distinct ids
"""

import asyncio

from todo_api.storage.memory_store import InMemoryTodoStore, TodoItem


async def test_first_id_is_one():
    store = InMemoryTodoStore()
    todo = await store.create("Learn Go", False)
    assert todo == TodoItem(id=1, task="Learn Go", done=False)


async def test_list_preserves_insertion_order():
    store = InMemoryTodoStore()
    for task in ("a", "b", "c"):
        await store.create(task, False)
    assert [t.task for t in await store.list_all()] == ["a", "b", "c"]


async def test_ids_not_reused_after_deleting_newest():
    store = InMemoryTodoStore()
    await store.create("a", False)
    second = await store.create("b", False)
    await store.delete(second.id)

    third = await store.create("c", False)

    assert third.id == 3


async def test_seeded_items_continue_from_max_id():
    store = InMemoryTodoStore([TodoItem(id=7, task="x"), TodoItem(id=3, task="y")])
    todo = await store.create("z", True)
    assert todo.id == 8


async def test_get_missing_returns_none():
    store = InMemoryTodoStore()
    assert await store.get(1) is None


async def test_update_replaces_fields_keeps_id():
    store = InMemoryTodoStore()
    todo = await store.create("a", False)

    updated = await store.update(todo.id, "b", True)

    assert updated == TodoItem(id=todo.id, task="b", done=True)
    assert await store.get(todo.id) == updated


async def test_update_missing_returns_none():
    store = InMemoryTodoStore()
    assert await store.update(5, "b", True) is None


async def test_delete_reports_whether_removed():
    store = InMemoryTodoStore()
    todo = await store.create("a", False)
    assert await store.delete(todo.id) is True
    assert await store.delete(todo.id) is False


async def test_returned_items_are_copies():
    store = InMemoryTodoStore()
    todo = await store.create("a", False)
    todo.task = "mutated"
    listed = await store.list_all()
    listed[0].done = True
    assert await store.get(todo.id) == TodoItem(id=todo.id, task="a", done=False)


async def test_concurrent_creates_get_distinct_ids():
    store = InMemoryTodoStore()

    todos = await asyncio.gather(
        *(store.create(f"task {i}", False) for i in range(50)),
    )

    ids = [t.id for t in todos]
    assert len(set(ids)) == 50
    assert len(await store.list_all()) == 50


async def test_health_check_is_always_true():
    assert await InMemoryTodoStore().health_check() is True
