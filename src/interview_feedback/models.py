# Models
"""
Pydantic models for stored documents, model output and API schemas.

Stored documents and the wire format use camelCase field names; attributes
are snake_case and either form is accepted on input.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from interview_feedback.config import READER_CONFIG


FEEDBACK_SCHEMA_VERSION = "2"

CategoryName = Literal[
    "Communication Skills",
    "Technical Knowledge",
    "Problem-Solving",
    "Cultural & Role Fit",
    "Confidence & Clarity",
]

CATEGORY_NAMES = get_args(CategoryName)


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Enums
# ============================================================================

class FeedbackErrorKind(str, Enum):
    """Which external call failed while creating feedback."""
    MODEL = "model"
    STORAGE = "storage"


# ============================================================================
# Documents
# ============================================================================

class Interview(CamelModel):
    """
    An interview document.

    Only the fields used for filtering and sorting are declared; every other
    stored field is kept as-is.
    """
    model_config = ConfigDict(extra="allow")

    id: str
    user_id: Any = None
    finalized: Any = None
    created_at: Any = None


class TranscriptEntry(BaseModel):
    """Single speaker turn in the interview transcript."""
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class CategoryScore(BaseModel):
    """Score and comment for one fixed evaluation category."""
    name: CategoryName
    score: int = Field(..., ge=0, le=100)
    comment: str


class FeedbackAssessment(CamelModel):
    """Structured output requested from the model."""
    total_score: int = Field(..., ge=0, le=100)
    category_scores: List[CategoryScore]
    strengths: List[str]
    areas_for_improvement: List[str]
    final_assessment: str

    @field_validator("category_scores")
    @classmethod
    def _exactly_fixed_categories(cls, value: List[CategoryScore]) -> List[CategoryScore]:
        names = [c.name for c in value]
        if sorted(names) != sorted(CATEGORY_NAMES):
            raise ValueError(
                f"categoryScores must contain each of {list(CATEGORY_NAMES)} exactly once, got {names}"
            )
        return value


class Feedback(CamelModel):
    """A stored feedback document."""
    interview_id: str
    user_id: str
    total_score: Union[int, float]
    category_scores: Dict[str, Union[int, float]]
    category_comments: Dict[str, str] = Field(default_factory=dict)
    strengths: List[str]
    areas_for_improvement: List[str]
    final_assessment: str
    created_at: str
    schema_version: str = FEEDBACK_SCHEMA_VERSION

    @classmethod
    def from_assessment(
        cls,
        assessment: FeedbackAssessment,
        interview_id: str,
        user_id: str,
        created_at: str,
    ) -> "Feedback":
        """Merge a model assessment with caller ids and a creation time."""
        return cls(
            interview_id=interview_id,
            user_id=user_id,
            total_score=assessment.total_score,
            category_scores={c.name: c.score for c in assessment.category_scores},
            category_comments={c.name: c.comment for c in assessment.category_scores},
            strengths=list(assessment.strengths),
            areas_for_improvement=list(assessment.areas_for_improvement),
            final_assessment=assessment.final_assessment,
            created_at=created_at,
        )

    def to_document(self) -> Dict[str, Any]:
        """Document body as written to the store."""
        return self.model_dump(by_alias=True)


class FeedbackOut(CamelModel):
    """
    A feedback document as read back, with its document id.

    Documents may predate the current schema or be written by other code,
    so nothing beyond the id is enforced and unknown fields are kept.
    """
    model_config = ConfigDict(extra="allow")

    id: str
    interview_id: Any = None
    user_id: Any = None
    total_score: Any = None
    category_scores: Any = None
    category_comments: Any = None
    strengths: Any = None
    areas_for_improvement: Any = None
    final_assessment: Any = None
    created_at: Any = None
    schema_version: Any = None


# ============================================================================
# Request Models
# ============================================================================

class CreateFeedbackParams(CamelModel):
    """Request to generate and store feedback for an interview."""
    interview_id: str
    user_id: str
    transcript: List[TranscriptEntry]
    feedback_id: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "interviewId": "int_123",
                "userId": "user_456",
                "transcript": [
                    {"role": "assistant", "content": "Tell me about yourself"},
                    {"role": "user", "content": "I am an engineer"},
                ],
            }
        },
    )


class GetFeedbackByInterviewIdParams(CamelModel):
    """Lookup of one user's feedback for an interview."""
    interview_id: str
    user_id: str


class GetLatestInterviewsParams(CamelModel):
    """Listing of other users' finalized interviews."""
    user_id: str
    limit: int = Field(
        default_factory=lambda: READER_CONFIG["latest_interviews_limit"], ge=0
    )


# ============================================================================
# Response Models
# ============================================================================

class CreateFeedbackResult(CamelModel):
    """Outcome of the feedback pipeline."""
    success: bool
    feedback_id: Optional[str] = None
    error: Optional[FeedbackErrorKind] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"success": True, "feedbackId": "fb_789"}
        },
    )


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "NotFound",
                "detail": "Interview not found: int_invalid",
            }
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: datetime
