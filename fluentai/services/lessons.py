"""
Lesson prompt and payload helpers.
"""
import logging
from typing import Any, Union

from pydantic import ValidationError

from fluentai.errors import MalformedAssistantReply
from fluentai.schemas import Lesson, ProficiencyLevel
from fluentai.services.orchestrator import decode_reply

logger = logging.getLogger(__name__)


def build_prompt(target_language: str, proficiency_level: Union[ProficiencyLevel, str], interests: str) -> str:
    level = ProficiencyLevel(proficiency_level).value
    return (
        f"Create a personalized language learning plan for a {level} level student "
        f"learning {target_language.strip()}. They are interested in {interests.strip()}."
    )


def parse_lesson(payload: Any) -> Lesson:
    """
    Validate an assistant payload as a Lesson.

    Accepts ``{"lesson": {...}}``, a bare lesson object, or either of those
    encoded once more as a JSON string.
    """
    if isinstance(payload, str):
        payload = decode_reply(payload)
    if isinstance(payload, dict) and "lesson" in payload:
        payload = payload["lesson"]
    try:
        return Lesson.model_validate(payload)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'lesson'}: {err['msg']}" for err in e.errors()[:3]
        )
        logger.error(f"Assistant returned a lesson with {e.error_count()} problem(s): {problems}")
        raise MalformedAssistantReply(f"Lesson does not match the expected shape: {problems}") from e
