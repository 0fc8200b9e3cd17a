"""
Meeting join endpoint.
"""

from typing import Dict, Any

from fastapi import APIRouter

from app.api.v1.schemas.meeting import ErrorResponse, JoinMeetingRequest, JoinMeetingResponse
from app.core.dependencies import JoinServiceDep
from app.core.logging import get_logger
from app.domain.services import MeetingJoinService

router = APIRouter()
logger = get_logger("api.meetings")


@router.post(
    "/join-meeting",
    response_model=JoinMeetingResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    tags=["Meetings"],
)
async def join_meeting(
    request: JoinMeetingRequest,
    service: MeetingJoinService = JoinServiceDep,
) -> Dict[str, Any]:
    """
    Join a meeting with a headless browser, stay for the configured
    duration, then leave.

    Args:
        request: Join request with link and token
        service: Join service (injected)

    Returns:
        Platform, join confirmation and completion time
    """
    logger.info(f"Join request: {request.link}")
    outcome = await service.handle_join(link=request.link, token=request.token)
    return outcome.to_dict()
