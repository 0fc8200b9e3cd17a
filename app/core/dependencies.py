"""
Dependency injection for the Meeting Join Bot API.
Services live on ``app.state`` and are built once in ``create_app``.
"""

from fastapi import Depends, Request

from app.core.config import Settings
from app.domain.services import MeetingJoinService


def get_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_join_service(request: Request) -> MeetingJoinService:
    """
    Dependency injection for the join service.

    Returns:
        MeetingJoinService instance
    """
    return request.app.state.join_service


SettingsDep = Depends(get_settings)
JoinServiceDep = Depends(get_join_service)
