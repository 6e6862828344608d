import pytest

from interview_feedback.document_store import document_store
from interview_feedback.gemini_feedback import GeminiFeedbackModel
from interview_feedback.models import FeedbackAssessment

from fakes import ASSESSMENT, FakeFirestore, FakeGenaiClient, genai_response


@pytest.fixture
def firestore():
    fake = FakeFirestore()
    document_store.use_client(fake)
    try:
        yield fake
    finally:
        document_store.use_client(None)


@pytest.fixture
def assessment() -> FeedbackAssessment:
    return FeedbackAssessment.model_validate(ASSESSMENT)


@pytest.fixture
def genai_client(assessment):
    return FakeGenaiClient(response=genai_response(parsed=assessment))


@pytest.fixture
def feedback_model(genai_client):
    return GeminiFeedbackModel(model="gemini-test", client=genai_client)
