import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from json_prompt.api.schemas import ConvertRequest, ConvertResponse, ErrorResponse
from json_prompt.config import get_settings
from json_prompt.errors import ConversionError, InputError
from json_prompt.service.converter import ConvertService
from json_prompt.ui.page import render_page

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="json-prompt", version="0.1.0")
service = ConvertService()


@app.exception_handler(ConversionError)
async def conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.as_payload())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # A missing or unusable prompt outranks every other body problem.
    errors = exc.errors()
    error = InputError()
    if _prompt_is_usable(exc.body, errors) and any(_error_field(item) == "requirements" for item in errors):
        error = InputError("Requirements must be text")
    logger.info("convert.rejected errors=%d message=%s", len(errors), error.message)
    return JSONResponse(status_code=error.status_code, content=error.as_payload())


def _error_field(item: dict) -> object:
    loc = tuple(item.get("loc", ()))
    return loc[-1] if loc else None


def _prompt_is_usable(body: object, errors: list[dict]) -> bool:
    if any(_error_field(item) == "prompt" for item in errors):
        return False
    if not isinstance(body, dict):
        return False
    prompt = body.get("prompt")
    return isinstance(prompt, str) and bool(prompt.strip())


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(render_page(settings))


@app.post(
    "/convert",
    response_model=ConvertResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def convert(req: ConvertRequest) -> ConvertResponse:
    result = await service.convert(req.prompt, req.requirements)
    return ConvertResponse(**result)
