"""
Shared FastAPI dependencies.
"""
import logging
from typing import Optional

from fluentai import config
from fluentai.errors import ConfigurationError
from fluentai.services.assistant_client import AssistantClient
from fluentai.services.orchestrator import LessonOrchestrator

logger = logging.getLogger(__name__)

_orchestrator: Optional[LessonOrchestrator] = None


def get_orchestrator() -> LessonOrchestrator:
    """One orchestrator per process, built from config on first use."""
    global _orchestrator
    if _orchestrator is None:
        if not config.OPENAI_API_KEY:
            raise ConfigurationError("OPENAI_API_KEY environment variable not set")
        client = AssistantClient(api_key=config.OPENAI_API_KEY)
        _orchestrator = LessonOrchestrator(client)
        logger.info(f"Assistant client ready for assistant {config.ASSISTANT_ID}")
    return _orchestrator


async def close_orchestrator() -> None:
    global _orchestrator
    if _orchestrator is not None:
        await _orchestrator.close()
        _orchestrator = None
