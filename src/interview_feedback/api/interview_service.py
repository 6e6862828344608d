# Interview Service
"""
Read-side handlers for interview and feedback documents.

Compound filters with ordering would need composite indexes in Firestore.
To avoid that, queries here use equality filters only and do any further
filtering, sorting and limiting in memory. This holds up while result sets
stay small.
"""

import logging
from typing import Any, Dict, List, Optional

from google.cloud.firestore_v1.base_query import FieldFilter

from interview_feedback.models import (
    FeedbackOut,
    GetFeedbackByInterviewIdParams,
    GetLatestInterviewsParams,
    Interview,
)
from interview_feedback.document_store import DocumentStore, document_store
from interview_feedback.timestamps import to_timestamp_ms

logger = logging.getLogger(__name__)


def _with_id(snapshot: Any) -> Dict[str, Any]:
    return {**(snapshot.to_dict() or {}), "id": snapshot.id}


def sort_newest_first(interviews: List[Interview]) -> List[Interview]:
    """
    Order interviews by normalized createdAt, newest first.

    Interviews with missing or unparseable timestamps go last. The relative
    order of interviews with equal timestamps is not part of the contract.
    """
    return sorted(interviews, key=lambda i: to_timestamp_ms(i.created_at), reverse=True)


class InterviewService:
    """
    Service class for interview and feedback lookups.

    Provides methods for:
    - Fetching one interview by id
    - Fetching a user's feedback for an interview
    - Listing other users' finalized interviews
    - Listing a user's own interviews

    Store errors are not caught here; they reach the caller.
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        self.store = store or document_store

    async def get_interview_by_id(self, interview_id: str) -> Optional[Interview]:
        """Return the interview, or None if no such document exists."""
        snapshot = await self.store.interviews().document(interview_id).get()
        if not snapshot.exists:
            return None
        return Interview.model_validate(_with_id(snapshot))

    async def get_feedback_by_interview_id(
        self,
        params: GetFeedbackByInterviewIdParams,
    ) -> Optional[FeedbackOut]:
        """Return the user's feedback for the interview, or None if there is none."""
        query = (
            self.store.feedback()
            .where(filter=FieldFilter("interviewId", "==", params.interview_id))
            .where(filter=FieldFilter("userId", "==", params.user_id))
            .limit(1)
        )
        snapshots = await query.get()
        if not snapshots:
            return None
        return FeedbackOut.model_validate(_with_id(snapshots[0]))

    async def get_latest_interviews(self, params: GetLatestInterviewsParams) -> List[Interview]:
        """
        List finalized interviews owned by other users, newest first.

        Fetches every finalized interview, then drops the caller's own,
        sorts and truncates to params.limit in memory.
        """
        snapshots = await (
            self.store.interviews()
            .where(filter=FieldFilter("finalized", "==", True))
            .get()
        )

        interviews = [
            Interview.model_validate(_with_id(s)) for s in snapshots
        ]
        others = [i for i in interviews if i.user_id != params.user_id]

        logger.debug(
            f"Latest interviews for {params.user_id}: {len(snapshots)} finalized, "
            f"{len(others)} from other users"
        )
        return sort_newest_first(others)[: params.limit]

    async def get_interviews_by_user_id(self, user_id: str) -> List[Interview]:
        """List all of a user's interviews, newest first."""
        snapshots = await (
            self.store.interviews()
            .where(filter=FieldFilter("userId", "==", user_id))
            .get()
        )
        return sort_newest_first([Interview.model_validate(_with_id(s)) for s in snapshots])


# Global service instance (singleton)
interview_service = InterviewService()
