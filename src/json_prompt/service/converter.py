import logging
from typing import Any

from json_prompt.conversion.prompts import build_instruction, echo_requirements
from json_prompt.conversion.schema import StructuredPrompt
from json_prompt.errors import InputError, ProviderError
from json_prompt.providers.llm.openai_compatible import OpenAICompatibleGenerator, StructuredGenerator

logger = logging.getLogger(__name__)


class ConvertService:
    def __init__(self, generator: StructuredGenerator | None = None) -> None:
        self.generator = generator or OpenAICompatibleGenerator()

    async def convert(self, prompt: Any, requirements: Any = None) -> dict[str, Any]:
        """Turn a free-text prompt into a ``StructuredPrompt``.

        Raises ``InputError`` before any provider call when the prompt is
        unusable, and ``ProviderError`` for every failure after that point.
        """
        prompt_text = self._clean_prompt(prompt)
        requirements_text = self._clean_requirements(requirements)
        logger.info(
            "convert.request prompt_chars=%d requirements_chars=%d",
            len(prompt_text),
            len(requirements_text or ""),
        )

        instruction = build_instruction(prompt_text, requirements_text)
        try:
            structured = await self.generator.generate(instruction, StructuredPrompt)
        except Exception as exc:
            error = ProviderError.from_exception(exc)
            logger.exception(
                "convert.failed reason=%s type=%s message=%s",
                error.reason,
                exc.__class__.__name__,
                error.message,
            )
            if error is exc:
                raise
            raise error from exc

        logger.info(
            "convert.done title=%s key_points=%d",
            structured.title,
            len(structured.key_points),
        )
        return {
            "original_prompt": prompt_text,
            "requirements": echo_requirements(requirements_text),
            "structured_prompt": structured,
        }

    @staticmethod
    def _clean_prompt(prompt: Any) -> str:
        if not isinstance(prompt, str) or not prompt.strip():
            logger.info("convert.rejected reason=missing_prompt")
            raise InputError()
        return prompt.strip()

    @staticmethod
    def _clean_requirements(requirements: Any) -> str | None:
        if requirements is None:
            return None
        if not isinstance(requirements, str):
            logger.info("convert.rejected reason=invalid_requirements")
            raise InputError("Requirements must be text")
        return requirements.strip() or None
