"""View state of the conversion page as immutable transitions.

The page script in ``templates/index.html`` carries its own copy of these
transitions and nothing at runtime calls ``reduce``. This module is the
Python statement of the same contract: keep the two in step by hand, and do
not read the tests here as coverage of the browser behaviour.
"""

import json
from dataclasses import asdict, dataclass, replace
from typing import Any

from json_prompt.errors import CONVERT_FAILED


@dataclass(frozen=True)
class ViewState:
    prompt: str = ""
    requirements: str = ""
    result: dict[str, Any] | None = None
    loading: bool = False
    copied: bool = False
    alert: str | None = None

    @property
    def can_submit(self) -> bool:
        return bool(self.prompt.strip()) and not self.loading

    @property
    def phase(self) -> str:
        return "submitting" if self.loading else "idle"

    def request_payload(self) -> dict[str, str]:
        payload = {"prompt": self.prompt.strip()}
        requirements = self.requirements.strip()
        if requirements:
            payload["requirements"] = requirements
        return payload

    def result_json(self) -> str:
        if self.result is None:
            return ""
        return json.dumps(self.result.get("structuredPrompt"), indent=2, ensure_ascii=False)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Edit:
    field: str
    value: str


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class Succeeded:
    body: dict[str, Any]


@dataclass(frozen=True)
class Failed:
    message: str | None = None


@dataclass(frozen=True)
class Copied:
    pass


@dataclass(frozen=True)
class CopyReset:
    pass


Event = Edit | Submit | Succeeded | Failed | Copied | CopyReset


def reduce(state: ViewState, event: Event) -> ViewState:
    if isinstance(event, Edit):
        if event.field not in ("prompt", "requirements"):
            raise ValueError(f"unknown field: {event.field}")
        return replace(state, **{event.field: event.value})
    if isinstance(event, Submit):
        if not state.can_submit:
            return state
        return replace(state, loading=True, alert=None)
    if isinstance(event, Succeeded):
        return replace(state, loading=False, result=event.body)
    if isinstance(event, Failed):
        return replace(state, loading=False, alert=event.message or CONVERT_FAILED)
    if isinstance(event, Copied):
        if state.result is None:
            return state
        return replace(state, copied=True)
    if isinstance(event, CopyReset):
        return replace(state, copied=False)
    raise TypeError(f"unsupported event: {event!r}")
