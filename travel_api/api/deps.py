from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession | None, None]:
    """One session per request in SQL mode; None when running in memory."""
    session_maker = request.app.state.session_maker
    if session_maker is None:
        yield None
        return
    async with session_maker() as session:
        yield session
