import asyncio
import logging

import pytest

from json_prompt.conversion.schema import StructuredPrompt
from json_prompt.errors import InputError, ProviderError
from json_prompt.service.converter import ConvertService


class _RecordingGenerator:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.instructions: list[str] = []

    async def generate(self, instruction: str, schema: type) -> StructuredPrompt:
        self.instructions.append(instruction)
        if self.error is not None:
            raise self.error
        return schema(
            title="t",
            description="d",
            key_points=["k1"],
            requirements=["r1"],
            output_format="json",
        )


def test_convert_returns_structured_prompt() -> None:
    generator = _RecordingGenerator()
    service = ConvertService(generator=generator)

    result = asyncio.run(service.convert("  Summarize this paper  ", "bullet points"))

    assert result["original_prompt"] == "Summarize this paper"
    assert result["requirements"] == "bullet points"
    assert result["structured_prompt"].requirements == ["r1"]
    assert generator.instructions == [
        'Convert this prompt into a structured format: "Summarize this paper"\n'
        "\n"
        "Additional requirements: bullet points\n"
        "\n"
        "Create a structured format with:\n"
        "- title: A clear title\n"
        "- description: Brief description\n"
        "- keyPoints: Array of important points\n"
        "- requirements: Any specific requirements (optional)\n"
        "- outputFormat: How the output should be formatted"
    ]


@pytest.mark.parametrize("prompt", [None, "", "  \n ", 7])
def test_unusable_prompt_raises_input_error(prompt) -> None:
    generator = _RecordingGenerator()
    service = ConvertService(generator=generator)

    with pytest.raises(InputError) as info:
        asyncio.run(service.convert(prompt))

    assert info.value.status_code == 400
    assert info.value.message == "Prompt is required"
    assert generator.instructions == []


def test_generator_failure_becomes_provider_error(caplog) -> None:
    service = ConvertService(generator=_RecordingGenerator(error=TimeoutError("Request timed out.")))

    with caplog.at_level(logging.INFO), pytest.raises(ProviderError) as info:
        asyncio.run(service.convert("prompt"))

    assert info.value.status_code == 500
    assert info.value.message == "Request timed out."
    assert info.value.reason == "timeout"
    failed = [record for record in caplog.records if record.getMessage().startswith("convert.failed")]
    assert len(failed) == 1
    assert failed[0].levelno == logging.ERROR


def test_provider_error_from_generator_is_kept() -> None:
    original = ProviderError("Model returned no StructuredPrompt object", reason="invalid_output")
    service = ConvertService(generator=_RecordingGenerator(error=original))

    with pytest.raises(ProviderError) as info:
        asyncio.run(service.convert("prompt"))

    assert info.value is original
