import logging
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel

from json_prompt.config import Settings, get_settings
from json_prompt.errors import ProviderError

logger = logging.getLogger(__name__)
ERROR_LOG_LIMIT = 1000

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class StructuredGenerator(Protocol):
    async def generate(self, instruction: str, schema: type[SchemaT]) -> SchemaT: ...


class OpenAICompatibleGenerator:
    """Schema-constrained generation against any OpenAI-compatible endpoint."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.llm_model = self._strip_provider_prefix(self.settings.openai_model.strip())
        self._llm: Any | None = None

    async def generate(self, instruction: str, schema: type[SchemaT]) -> SchemaT:
        structured = self._get_llm().with_structured_output(
            schema,
            method=self.settings.llm_structured_method,
        )
        logger.info(
            "llm.call model=%s schema=%s method=%s timeout=%.1fs retries=%d",
            self.llm_model,
            schema.__name__,
            self.settings.llm_structured_method,
            self.settings.llm_timeout_seconds,
            self.settings.llm_num_retries,
        )
        logger.info("llm.request.full model=%s\n%s", self.llm_model, instruction)
        try:
            result = await structured.ainvoke(instruction)
        except Exception as exc:
            logger.error(
                "llm.error model=%s type=%s detail=%s",
                self.llm_model,
                exc.__class__.__name__,
                self._extract_error_detail(exc),
            )
            raise

        if isinstance(result, dict):
            result = schema.model_validate(result)
        if not isinstance(result, schema):
            raise ProviderError(
                f"Model returned no {schema.__name__} object",
                reason="invalid_output",
            )
        logger.info(
            "llm.response.full model=%s\n%s",
            self.llm_model,
            result.model_dump_json(by_alias=True, exclude_none=True),
        )
        return result

    def _get_llm(self):
        if self._llm is None:
            from langchain_openai import ChatOpenAI

            self._llm = ChatOpenAI(
                model=self.llm_model,
                api_key=self.settings.openai_api_key or None,
                base_url=self.settings.openai_base_url,
                timeout=self.settings.llm_timeout_seconds,
                max_retries=self.settings.llm_num_retries,
            )
        return self._llm

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        normalized = " ".join(text.split()).strip()
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"

    def _extract_error_detail(self, exc: Exception) -> str:
        status_code = getattr(exc, "status_code", None)
        message = getattr(exc, "message", None) or str(exc)
        body = getattr(exc, "body", None)
        details = [f"status_code={status_code}" if status_code is not None else ""]
        if body is not None:
            details.append(f"body={body}")
        details.append(f"message={message}")
        return self._clip(" ".join([part for part in details if part]).strip(), ERROR_LOG_LIMIT)

    @staticmethod
    def _strip_provider_prefix(model: str) -> str:
        if "/" not in model:
            return model
        return model.split("/", 1)[1]
