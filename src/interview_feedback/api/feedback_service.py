# Feedback Service
"""
Service for generating and storing interview feedback.

Formats the interview transcript, asks Gemini for a structured assessment,
and writes the result to the feedback collection. Failures never escape
create_feedback; they are logged and reported through CreateFeedbackResult.
"""

import logging
from typing import Optional

from interview_feedback.models import (
    CreateFeedbackParams,
    CreateFeedbackResult,
    Feedback,
    FeedbackAssessment,
    FeedbackErrorKind,
)
from interview_feedback.document_store import DocumentStore, document_store
from interview_feedback.errors import FeedbackGenerationError, FeedbackStorageError
from interview_feedback.gemini_feedback import GeminiFeedbackModel
from interview_feedback.prompts import format_transcript
from interview_feedback.timestamps import utc_now_iso

logger = logging.getLogger(__name__)


class FeedbackService:
    """
    Service class for the feedback pipeline.

    This service is stateless apart from its collaborators and can be
    called concurrently.

    Usage:
        result = await feedback_service.create_feedback(
            CreateFeedbackParams(
                interview_id="int_123",
                user_id="user_456",
                transcript=[TranscriptEntry(role="user", content="...")],
            )
        )
        if result.success:
            ...
    """

    def __init__(
        self,
        model: Optional[GeminiFeedbackModel] = None,
        store: Optional[DocumentStore] = None,
    ):
        """
        Initialize the feedback service.

        Args:
            model: Feedback model (default: GeminiFeedbackModel from config)
            store: Document store (default: the process-wide store)
        """
        self.model = model or GeminiFeedbackModel()
        self.store = store or document_store
        logger.info("FeedbackService initialized")

    async def _save(self, feedback: Feedback, feedback_id: Optional[str]) -> str:
        """
        Write one feedback document.

        Overwrites the document at feedback_id when given, otherwise creates
        a document with a store-generated id.

        Returns:
            The effective document id
        """
        collection = self.store.feedback()
        feedback_ref = collection.document(feedback_id) if feedback_id else collection.document()

        try:
            await feedback_ref.set(feedback.to_document())
        except Exception as e:
            raise FeedbackStorageError(f"Failed to write feedback {feedback_ref.id}: {e}") from e

        return feedback_ref.id

    async def create_feedback(self, params: CreateFeedbackParams) -> CreateFeedbackResult:
        """
        Generate feedback for an interview transcript and store it.

        Args:
            params: Interview id, user id, transcript and optional feedback id

        Returns:
            CreateFeedbackResult; check `success` rather than expecting an exception
        """
        assessment: Optional[FeedbackAssessment] = None

        try:
            formatted_transcript = format_transcript(params.transcript)

            logger.info(
                f"🔍 Generating feedback for interview {params.interview_id} "
                f"({len(params.transcript)} transcript entries)..."
            )
            assessment = await self.model.generate(formatted_transcript)

            feedback = Feedback.from_assessment(
                assessment,
                interview_id=params.interview_id,
                user_id=params.user_id,
                created_at=utc_now_iso(),
            )
            feedback_id = await self._save(feedback, params.feedback_id)

        except FeedbackGenerationError:
            logger.exception(f"❌ Error generating feedback for interview {params.interview_id}")
            return CreateFeedbackResult(success=False, error=FeedbackErrorKind.MODEL)
        except FeedbackStorageError:
            logger.exception(f"❌ Error saving feedback for interview {params.interview_id}")
            return CreateFeedbackResult(success=False, error=FeedbackErrorKind.STORAGE)
        except Exception:
            logger.exception(f"❌ Unexpected error creating feedback for interview {params.interview_id}")
            kind = FeedbackErrorKind.MODEL if assessment is None else FeedbackErrorKind.STORAGE
            return CreateFeedbackResult(success=False, error=kind)

        logger.info(f"✅ Feedback {feedback_id} saved for interview {params.interview_id}")
        return CreateFeedbackResult(success=True, feedback_id=feedback_id)


# Global service instance (singleton)
feedback_service = FeedbackService()
