"""
Prompt text for interview feedback generation.
"""

from typing import Iterable

from interview_feedback.models import TranscriptEntry


FEEDBACK_SYSTEM_INSTRUCTION = (
    "You are a professional interviewer analyzing a mock interview. "
    "Your task is to evaluate the candidate based on structured categories. "
    "Be strict and thorough."
)

CATEGORY_GUIDE = """\
- **Communication Skills**: Clarity, articulation, structured responses.
- **Technical Knowledge**: Understanding of key concepts for the role.
- **Problem-Solving**: Ability to analyze problems and propose solutions.
- **Cultural & Role Fit**: Alignment with company values and job role.
- **Confidence & Clarity**: Confidence in responses, engagement, and clarity.
"""

FEEDBACK_PROMPT_TEMPLATE = """\
You are an AI interviewer analyzing a mock interview. Your task is to evaluate the candidate based on structured categories. Be thorough and detailed in your analysis. Don't be lenient with the candidate. If there are mistakes or areas for improvement, point them out.

Transcript:
{transcript}

Please score the candidate from 0 to 100 in the following areas. Do not add categories other than the ones provided:
{categories}
Also give a total score from 0 to 100, the candidate's strengths, the areas for improvement and a final assessment.
"""


def format_transcript(transcript: Iterable[TranscriptEntry]) -> str:
    """
    Render speaker turns as one "- role: content" line each, in order.

    An empty transcript renders as an empty string.
    """
    return "".join(f"- {entry.role}: {entry.content}\n" for entry in transcript)


def build_feedback_prompt(formatted_transcript: str) -> str:
    """User prompt embedding the transcript and the scoring instructions."""
    return FEEDBACK_PROMPT_TEMPLATE.format(
        transcript=formatted_transcript,
        categories=CATEGORY_GUIDE,
    )
