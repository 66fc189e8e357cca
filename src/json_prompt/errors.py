from typing import Any

PROMPT_REQUIRED = "Prompt is required"
CONVERT_FAILED = "Failed to convert prompt. Please try again."


class ConversionError(Exception):
    """Request-terminal failure rendered as ``{"error": message}``."""

    status_code = 500
    default_message = CONVERT_FAILED

    def __init__(self, message: str | None = None) -> None:
        self.message = (message or "").strip() or self.default_message
        super().__init__(self.message)

    def as_payload(self) -> dict[str, Any]:
        return {"error": self.message}


class InputError(ConversionError):
    status_code = 400
    default_message = PROMPT_REQUIRED


class ProviderError(ConversionError):
    status_code = 500
    default_message = CONVERT_FAILED

    def __init__(self, message: str | None = None, reason: str = "provider") -> None:
        super().__init__(message)
        self.reason = reason

    @classmethod
    def from_exception(cls, exc: Exception) -> "ProviderError":
        if isinstance(exc, ProviderError):
            return exc
        message = getattr(exc, "message", None) or str(exc)
        return cls(str(message), reason=classify_failure(exc))


def classify_failure(exc: Exception) -> str:
    # Only used for logs; clients always get the plain message.
    name = exc.__class__.__name__.lower()
    status_code = getattr(exc, "status_code", None)
    if "timeout" in name or isinstance(exc, TimeoutError):
        return "timeout"
    if status_code == 429 or "ratelimit" in name:
        return "rate_limit"
    if "connection" in name or isinstance(exc, ConnectionError):
        return "connection"
    if "outputparser" in name or "validation" in name or isinstance(exc, ValueError):
        return "invalid_output"
    return "provider"
