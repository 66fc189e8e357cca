from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from json_prompt.conversion.schema import StructuredPrompt


class ConvertRequest(BaseModel):
    prompt: str = Field(..., min_length=1, description="Free-text prompt to restructure.")
    requirements: str | None = Field(
        default=None,
        description="Optional extra guidance appended to the instruction.",
    )


class ConvertResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    original_prompt: str
    requirements: str
    structured_prompt: StructuredPrompt


class ErrorResponse(BaseModel):
    error: str
