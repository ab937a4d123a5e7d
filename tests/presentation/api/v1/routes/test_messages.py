"""Test message API endpoints"""

from datetime import datetime
from uuid import UUID

import pytest
from fastapi import status

from tests.doubles import MessageBuilder

MESSAGE_ID = "a0eebc99-9c0b-4ef8-bb6d-6bb9bd380a11"


@pytest.mark.asyncio
async def test_post_message_success(client, message_repo):
    """Test successful message post"""
    response = await client.post(
        "/api/messages",
        json={"id": MESSAGE_ID, "author": "Alice", "text": "Hello world!"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.content == b""
    stored = await message_repo.find_by_id(UUID(MESSAGE_ID))
    assert stored.author == "Alice"
    assert stored.text == "Hello world!"
    assert stored.published_date == datetime(2020, 2, 14, 17, 46, 51)


@pytest.mark.asyncio
async def test_post_message_duplicate_id(client):
    """Test second post with the same id is a conflict"""
    body = {"id": MESSAGE_ID, "author": "Alice", "text": "Hello"}
    await client.post("/api/messages", json=body)

    response = await client.post("/api/messages", json=body)

    assert response.status_code == status.HTTP_409_CONFLICT
    data = response.json()
    assert data["error"] == "CONFLICT"
    assert data["message"] == "Message already exists"
    assert data["details"] == {"message_id": MESSAGE_ID}


@pytest.mark.asyncio
async def test_post_message_too_long(client, message_repo):
    """Test over-length text is rejected and nothing is stored"""
    response = await client.post(
        "/api/messages",
        json={"id": MESSAGE_ID, "author": "Alice", "text": "a" * 281},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
    data = response.json()
    assert data["error"] == "VALIDATION_ERROR"
    assert data["message"] == "Message text must be less than 280 characters"
    assert not await message_repo.exists_by_id(UUID(MESSAGE_ID))


@pytest.mark.asyncio
async def test_post_message_malformed_id(client):
    """Test request body validation by FastAPI"""
    response = await client.post(
        "/api/messages",
        json={"id": "not-a-uuid", "author": "Alice", "text": "Hello"},
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


@pytest.mark.asyncio
async def test_edit_message_success(client, message_repo):
    """Test editing the text of an existing message"""
    message_repo.set_messages([MessageBuilder().with_id(MESSAGE_ID).with_text("Hello").build()])

    response = await client.put(
        "/api/messages",
        json={"id": MESSAGE_ID, "text": "Hello world! I'm Alice"},
    )

    assert response.status_code == status.HTTP_200_OK
    stored = await message_repo.find_by_id(UUID(MESSAGE_ID))
    assert stored.text == "Hello world! I'm Alice"


@pytest.mark.asyncio
async def test_edit_message_not_found(client):
    """Test editing a message that does not exist"""
    response = await client.put("/api/messages", json={"id": MESSAGE_ID, "text": "Hello"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    data = response.json()
    assert data["error"] == "RESOURCE_NOT_FOUND"
    assert data["message"] == "Message not found"


@pytest.mark.asyncio
async def test_edit_message_blank_text(client, message_repo):
    """Test blank text is rejected on edit"""
    message_repo.set_messages([MessageBuilder().with_id(MESSAGE_ID).build()])

    response = await client.put("/api/messages", json={"id": MESSAGE_ID, "text": " "})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
    assert response.json()["message"] == "Message text must not be blank"


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client):
    """Test the correlation ID header round-trips"""
    response = await client.put(
        "/api/messages",
        json={"id": MESSAGE_ID, "text": "Hello"},
        headers={"X-Correlation-ID": "req-123"},
    )

    assert response.headers["X-Correlation-ID"] == "req-123"


@pytest.mark.asyncio
async def test_correlation_id_is_generated(client):
    response = await client.get("/")

    assert UUID(response.headers["X-Correlation-ID"])
