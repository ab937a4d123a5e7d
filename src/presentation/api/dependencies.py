from collections.abc import AsyncIterator

from fastapi import Depends

from src.application.interfaces.repositories import IMessageRepository
from src.application.interfaces.services import IDateProvider
from src.application.use_cases.messages.edit_message import EditMessageHandler
from src.application.use_cases.messages.post_message import PostMessageHandler
from src.application.use_cases.messages.view_timeline import ViewTimelineHandler
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.persistence.database import get_sessionmaker
from src.infrastructure.persistence.repositories.factory import MessageRepositoryFactory
from src.infrastructure.time.system_date_provider import SystemDateProvider

# Global service instances (singletons)
_date_provider: IDateProvider | None = None


def get_date_provider() -> IDateProvider:
    """
    Clock dependency (singleton)

    Tests override this dependency with a fixed clock.
    """
    global _date_provider
    if _date_provider is None:
        _date_provider = SystemDateProvider()
    return _date_provider


async def get_message_repo(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[IMessageRepository]:
    """
    Message repository dependency for the configured store.

    The database store runs each request in one transaction:
    commits on success, rolls back on exception.
    """
    if settings.message_store == "database":
        async with get_sessionmaker()() as session:
            async with session.begin():
                yield MessageRepositoryFactory.create_message_repository(settings, session)
    else:
        yield MessageRepositoryFactory.create_message_repository(settings)


async def get_post_message_handler(
    repo: IMessageRepository = Depends(get_message_repo),
    date_provider: IDateProvider = Depends(get_date_provider),
) -> PostMessageHandler:
    """Post message use case dependency"""
    return PostMessageHandler(message_repo=repo, date_provider=date_provider)


async def get_edit_message_handler(
    repo: IMessageRepository = Depends(get_message_repo),
) -> EditMessageHandler:
    """Edit message use case dependency"""
    return EditMessageHandler(message_repo=repo)


async def get_view_timeline_handler(
    repo: IMessageRepository = Depends(get_message_repo),
    date_provider: IDateProvider = Depends(get_date_provider),
) -> ViewTimelineHandler:
    """View timeline use case dependency"""
    return ViewTimelineHandler(message_repo=repo, date_provider=date_provider)
