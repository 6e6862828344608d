"""
Exceptions raised by the feedback pipeline.
"""


class FeedbackError(RuntimeError):
    """Base class for feedback pipeline failures."""


class FeedbackGenerationError(FeedbackError):
    """The model call failed or returned output that does not fit the schema."""


class FeedbackStorageError(FeedbackError):
    """Writing the feedback document failed."""
