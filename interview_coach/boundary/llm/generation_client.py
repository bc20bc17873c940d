"""
Generation provider client.

Converts a GenerationRequest into LangChain chat messages, calls the chat
model once and returns the text of its reply. Anything other than a
non-empty text reply is a GenerationError.

Dependencies: langchain_core, langchain_google_genai, dotenv
System role: Language model boundary for questions and feedback
"""

import logging

from dotenv import load_dotenv
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from interview_coach.boundary.llm.llm_schemas import GenerationRequest, GenerationResult
from interview_coach.configs.llm import LLMSettings
from interview_coach.core.exceptions import GenerationError

load_dotenv()

logger = logging.getLogger(__name__)


def _content_to_text(content) -> str:
    """Flatten string or content-block list into plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else "")
            for item in content
        )
    return ""


class GenerationClient:
    """Single-shot chat generation with response validation."""

    def __init__(self, model: BaseChatModel) -> None:
        self._model = model

    @staticmethod
    def to_messages(request: GenerationRequest) -> list[BaseMessage]:
        messages: list[BaseMessage] = []
        if request.system_instruction:
            messages.append(SystemMessage(content=request.system_instruction))
        for turn in request.turns:
            if turn.role == "user":
                messages.append(HumanMessage(content=turn.text))
            else:
                messages.append(AIMessage(content=turn.text))
        return messages

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate one continuation.

        Args:
            request: Validated system instruction and turns

        Returns:
            GenerationResult: Reply text as returned by the model

        Raises:
            GenerationError: Provider failure or empty/non-text reply
        """
        messages = self.to_messages(request)
        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:generate - Provider call failed: {type(e).__name__}: {e}")
            raise GenerationError(
                f"Language model call failed: {e}",
                details={"turns": len(request.turns)},
            ) from e

        text = _content_to_text(getattr(response, "content", None))
        if not text.strip():
            raise GenerationError("Language model returned an empty response")

        logger.debug(f"{__name__}:generate - Generated {len(text)} characters")
        return GenerationResult(text=text)


def create_generation_client(settings: LLMSettings) -> GenerationClient:
    """Build the Gemini-backed generation client."""
    kwargs = {
        "model": settings.generation_model,
        "temperature": settings.temperature,
        "max_retries": settings.max_retries,
        "timeout": settings.request_timeout,
    }
    if settings.api_key:
        kwargs["google_api_key"] = settings.api_key
    return GenerationClient(ChatGoogleGenerativeAI(**kwargs))
