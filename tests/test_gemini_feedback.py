import json

import pytest

from fakes import ASSESSMENT, FakeGenaiClient, genai_response
from interview_feedback.errors import FeedbackGenerationError
from interview_feedback.gemini_feedback import GeminiFeedbackModel
from interview_feedback.prompts import FEEDBACK_SYSTEM_INSTRUCTION


async def test_generate_sends_schema_and_instructions(feedback_model, genai_client, assessment):
    result = await feedback_model.generate("- user: hello\n")

    assert result == assessment
    call = genai_client.models.calls[0]
    assert call["model"] == "gemini-test"
    assert "- user: hello\n" in call["contents"]
    assert call["config"] is feedback_model.config
    assert feedback_model.config.response_mime_type == "application/json"
    assert feedback_model.config.response_schema is not None
    assert FEEDBACK_SYSTEM_INSTRUCTION in str(feedback_model.config.system_instruction)


async def test_generate_falls_back_to_response_text():
    client = FakeGenaiClient(response=genai_response(parsed=None, text=json.dumps(ASSESSMENT)))
    model = GeminiFeedbackModel(client=client)

    result = await model.generate("")

    assert result.total_score == ASSESSMENT["totalScore"]


async def test_generate_rejects_output_outside_schema():
    bad = dict(ASSESSMENT, categoryScores=ASSESSMENT["categoryScores"][:3])
    client = FakeGenaiClient(response=genai_response(parsed=None, text=json.dumps(bad)))
    model = GeminiFeedbackModel(client=client)

    with pytest.raises(FeedbackGenerationError):
        await model.generate("- user: hi\n")


async def test_generate_rejects_empty_response():
    model = GeminiFeedbackModel(client=FakeGenaiClient(response=genai_response()))

    with pytest.raises(FeedbackGenerationError):
        await model.generate("- user: hi\n")


async def test_generate_wraps_transport_errors():
    model = GeminiFeedbackModel(client=FakeGenaiClient(error=ConnectionError("quota exceeded")))

    with pytest.raises(FeedbackGenerationError) as excinfo:
        await model.generate("- user: hi\n")

    assert isinstance(excinfo.value.__cause__, ConnectionError)
