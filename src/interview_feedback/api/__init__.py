# Interview Feedback API Package
"""
FastAPI backend for interview feedback.

Provides REST API endpoints for:
- Generating and storing AI feedback for an interview transcript
- Retrieving interviews by id or by owner
- Listing other users' finalized interviews
- Retrieving a user's feedback for an interview
"""

from .main import app
from .feedback_service import FeedbackService, feedback_service
from .interview_service import InterviewService, interview_service

__all__ = [
    "app",
    "FeedbackService",
    "feedback_service",
    "InterviewService",
    "interview_service",
]
