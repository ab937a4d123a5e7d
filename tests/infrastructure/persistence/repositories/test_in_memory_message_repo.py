"""Test in-memory message repository"""

from uuid import UUID

import pytest

from tests.doubles import MessageBuilder

ALICE_ID = UUID("a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11")
BOB_ID = UUID("c0eebc99-9c0b-4ef8-bb6d-6bb9bd380a13")


@pytest.mark.asyncio
async def test_save_returns_a_copy(message_repo):
    message = MessageBuilder().with_id(ALICE_ID).build()

    saved = await message_repo.save(message)

    assert saved == message
    assert saved is not message
    assert saved.snapshot() == message.snapshot()


@pytest.mark.asyncio
async def test_mutating_caller_object_does_not_change_stored_state(message_repo):
    message = MessageBuilder().with_id(ALICE_ID).with_text("Stored").build()
    await message_repo.save(message)

    message.edit_text("Changed after save")
    fetched = await message_repo.find_by_id(ALICE_ID)
    fetched.edit_text("Changed after find")

    stored = await message_repo.find_by_id(ALICE_ID)
    assert stored.text == "Stored"


@pytest.mark.asyncio
async def test_save_with_same_id_overwrites(message_repo):
    await message_repo.save(MessageBuilder().with_id(ALICE_ID).with_text("First").build())
    await message_repo.save(MessageBuilder().with_id(ALICE_ID).with_text("Second").build())

    stored = await message_repo.find_by_id(ALICE_ID)
    assert stored.text == "Second"
    assert len(message_repo.messages()) == 1


@pytest.mark.asyncio
async def test_find_all_by_author_is_exact_match(message_repo):
    message_repo.set_messages(
        [
            MessageBuilder().with_id(ALICE_ID).with_author("Alice").build(),
            MessageBuilder().with_id(BOB_ID).with_author("Bob").build(),
        ]
    )

    assert [m.id for m in await message_repo.find_all_by_author("Alice")] == [ALICE_ID]
    assert await message_repo.find_all_by_author("alice") == []


@pytest.mark.asyncio
async def test_find_by_id_and_exists_by_id(message_repo):
    message_repo.set_messages([MessageBuilder().with_id(ALICE_ID).build()])

    assert (await message_repo.find_by_id(ALICE_ID)).id == ALICE_ID
    assert await message_repo.find_by_id(BOB_ID) is None
    assert await message_repo.exists_by_id(ALICE_ID) is True
    assert await message_repo.exists_by_id(BOB_ID) is False
