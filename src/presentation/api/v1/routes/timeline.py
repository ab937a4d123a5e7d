from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.params import Query

from src.application.dto.messages import GetTimelineRequest
from src.application.use_cases.messages.view_timeline import ViewTimelineHandler
from src.presentation.api.dependencies import get_view_timeline_handler
from src.presentation.api.v1.schemas.message import TimelineMessageResponse
from src.shared.telemetry.logging import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=list[TimelineMessageResponse])
async def view_timeline(
    author: Annotated[str, Query(description="Author whose messages to list")],
    handler: Annotated[ViewTimelineHandler, Depends(get_view_timeline_handler)],
) -> list[TimelineMessageResponse]:
    """List an author's messages, most recent first"""
    logger.debug("View timeline for author %s", author)
    timeline = await handler.handle(GetTimelineRequest(author=author))
    return [TimelineMessageResponse.model_validate(entry) for entry in timeline]
