from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StructuredPrompt(BaseModel):
    """Fixed output shape the generation call is constrained to."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., description="A clear title")
    description: str = Field(..., description="Brief description")
    key_points: list[str] = Field(..., description="Array of important points")
    requirements: list[str] | None = Field(
        default=None,
        description="Any specific requirements (optional)",
    )
    output_format: str = Field(..., description="How the output should be formatted")

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
