# API Routes
"""
FastAPI route handlers for the Interview Feedback API.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from interview_feedback.api.feedback_service import FeedbackService, feedback_service
from interview_feedback.api.interview_service import InterviewService, interview_service
from interview_feedback.models import (
    CreateFeedbackParams,
    CreateFeedbackResult,
    ErrorResponse,
    FeedbackOut,
    GetFeedbackByInterviewIdParams,
    GetLatestInterviewsParams,
    Interview,
)
from interview_feedback.config import READER_CONFIG

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["interview"])


def get_feedback_service() -> FeedbackService:
    """Dependency to get the global feedback service singleton."""
    return feedback_service


def get_interview_service() -> InterviewService:
    """Dependency to get the global interview service singleton."""
    return interview_service


# ============================================================================
# Feedback Endpoints
# ============================================================================

@router.post(
    "/feedback",
    response_model=CreateFeedbackResult,
    response_model_exclude_none=True,
    summary="Generate interview feedback",
    description=(
        "Evaluate an interview transcript with Gemini and store the feedback. "
        "Always returns 200; check `success` in the body."
    ),
)
async def create_feedback(
    request: CreateFeedbackParams,
    service: FeedbackService = Depends(get_feedback_service),
) -> CreateFeedbackResult:
    """Run the feedback pipeline for one interview."""
    return await service.create_feedback(request)


@router.get(
    "/interviews/{interview_id}/feedback",
    response_model=FeedbackOut,
    responses={404: {"model": ErrorResponse}},
    summary="Get feedback for an interview",
    description="Get the feedback a user received for an interview.",
)
async def get_feedback_by_interview_id(
    interview_id: str,
    user_id: str = Query(..., alias="userId"),
    service: InterviewService = Depends(get_interview_service),
) -> FeedbackOut:
    """Get a user's feedback for an interview."""
    feedback = await service.get_feedback_by_interview_id(
        GetFeedbackByInterviewIdParams(interview_id=interview_id, user_id=user_id)
    )
    if feedback is None:
        raise HTTPException(status_code=404, detail=f"Feedback not found for interview: {interview_id}")
    return feedback


# ============================================================================
# Interview Endpoints
# ============================================================================

@router.get(
    "/interviews/latest",
    response_model=List[Interview],
    summary="List latest interviews",
    description="List finalized interviews from other users, newest first.",
)
async def get_latest_interviews(
    user_id: str = Query(..., alias="userId"),
    limit: int = Query(READER_CONFIG["latest_interviews_limit"], ge=0),
    service: InterviewService = Depends(get_interview_service),
) -> List[Interview]:
    """List other users' finalized interviews."""
    return await service.get_latest_interviews(
        GetLatestInterviewsParams(user_id=user_id, limit=limit)
    )


@router.get(
    "/interviews/{interview_id}",
    response_model=Interview,
    responses={404: {"model": ErrorResponse}},
    summary="Get an interview",
    description="Retrieve a single interview document by id.",
)
async def get_interview_by_id(
    interview_id: str,
    service: InterviewService = Depends(get_interview_service),
) -> Interview:
    """Get an interview by id."""
    interview = await service.get_interview_by_id(interview_id)
    if interview is None:
        raise HTTPException(status_code=404, detail=f"Interview not found: {interview_id}")
    return interview


@router.get(
    "/users/{user_id}/interviews",
    response_model=List[Interview],
    summary="List a user's interviews",
    description="List all interviews belonging to a user, newest first.",
)
async def get_interviews_by_user_id(
    user_id: str,
    service: InterviewService = Depends(get_interview_service),
) -> List[Interview]:
    """List a user's own interviews."""
    return await service.get_interviews_by_user_id(user_id)
