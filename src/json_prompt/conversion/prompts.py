AUTO_REQUIREMENTS = "Auto-generated structure"

SCHEMA_GUIDE = "\n".join(
    [
        "Create a structured format with:",
        "- title: A clear title",
        "- description: Brief description",
        "- keyPoints: Array of important points",
        "- requirements: Any specific requirements (optional)",
        "- outputFormat: How the output should be formatted",
    ]
)


def build_instruction(prompt: str, requirements: str | None = None) -> str:
    """Embed the literal prompt and requirements in the conversion instruction.

    The result depends only on the arguments, so identical inputs always yield
    identical instructions.
    """
    lines = [f'Convert this prompt into a structured format: "{prompt}"', ""]
    if requirements:
        lines.extend([f"Additional requirements: {requirements}", ""])
    lines.append(SCHEMA_GUIDE)
    return "\n".join(lines)


def echo_requirements(requirements: str | None) -> str:
    return requirements or AUTO_REQUIREMENTS
