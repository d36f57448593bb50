"""
Advice Generator - hosted chat model wrapper for weather advisories.

Two modes over the same model capability:
- generate_once(): waits for the full answer and returns its text
- generate_stream(): yields Fragment events as text arrives, then exactly one
  End when the model stream is exhausted, or one Failure if it breaks
"""

import logging
from typing import Any, AsyncIterator, Callable, Dict, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from advisor_service.config.settings import settings
from advisor_service.errors import GenerationError
from advisor_service.models import End, Failure, Fragment, GenerationEvent

logger = logging.getLogger(__name__)


def message_text(content: Any) -> str:
    """Concatenate every textual part of a message content payload."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text") or "")
    return "".join(parts)


class AdviceGenerator:
    """Generates advisory text from a prompt, whole or incrementally."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        advice_model: Optional[str] = None,
        stream_model: Optional[str] = None,
        llm_factory: Optional[Callable[[str], BaseChatModel]] = None,
    ) -> None:
        self._api_key = api_key or settings.GEMINI_API_KEY
        self.advice_model = advice_model or settings.ADVICE_MODEL
        self.stream_model = stream_model or settings.STREAM_ADVICE_MODEL
        self._llm_factory = llm_factory or self._create_llm
        self._llms: Dict[str, BaseChatModel] = {}

    def _create_llm(self, model: str) -> BaseChatModel:
        return ChatOpenAI(
            model=model,
            api_key=self._api_key,
            base_url=settings.LLM_BASE_URL,
            temperature=settings.LLM_TEMPERATURE,
        )

    def _get_llm(self, model: str) -> BaseChatModel:
        # Models are created lazily and reused across requests
        if model not in self._llms:
            self._llms[model] = self._llm_factory(model)
            logger.info("Initialized chat model %s", model)
        return self._llms[model]

    async def generate_once(self, prompt: str) -> str:
        """
        Run the model to completion and return the advisory text.

        Raises:
            GenerationError: Model call failed or returned no content.
        """
        llm = self._get_llm(self.advice_model)
        try:
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error("Advice generation failed: %s", e)
            raise GenerationError(f"model API failed: {e}") from e

        content = getattr(response, "content", None)
        if not content:
            raise GenerationError("no response generated")
        return message_text(content)

    async def generate_stream(self, prompt: str) -> AsyncIterator[GenerationEvent]:
        """
        Stream the advisory as tagged events.

        Empty text parts are skipped. Task cancellation propagates untouched.
        """
        llm = self._get_llm(self.stream_model)
        fragments = 0
        try:
            async for chunk in llm.astream([HumanMessage(content=prompt)]):
                text = message_text(getattr(chunk, "content", None))
                if not text:
                    continue
                fragments += 1
                yield Fragment(text=text)
        except Exception as e:
            logger.error("Advice streaming failed after %d fragments: %s", fragments, e)
            yield Failure(error=GenerationError(f"streaming failed: {e}"))
            return

        logger.debug("Advice stream finished after %d fragments", fragments)
        yield End()
