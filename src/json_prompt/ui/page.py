import json
from functools import lru_cache
from pathlib import Path

from json_prompt.config import Settings
from json_prompt.errors import CONVERT_FAILED
from json_prompt.ui.state import ViewState

BOOTSTRAP_MARKER = "__JSON_PROMPT_BOOTSTRAP__"


@lru_cache(maxsize=1)
def load_template(filename: str = "index.html") -> str:
    template_dir = Path(__file__).resolve().parent / "templates"
    return (template_dir / filename).read_text(encoding="utf-8")


def bootstrap(settings: Settings, endpoint: str = "/convert") -> dict:
    return {
        "endpoint": endpoint,
        "copyResetMs": settings.copy_reset_ms,
        "fallbackError": CONVERT_FAILED,
        "initialState": ViewState().as_dict(),
    }


def render_page(settings: Settings, endpoint: str = "/convert") -> str:
    # "</" would close the inline script early.
    payload = json.dumps(bootstrap(settings, endpoint), ensure_ascii=False).replace("</", "<\\/")
    return load_template().replace(BOOTSTRAP_MARKER, payload)
