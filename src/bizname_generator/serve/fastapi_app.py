"""FastAPI surface for the name-generation pipeline.

Endpoints:
- GET /health
- POST /generate  { "description": "...", "keywords": "...", "tones": ["Catchy", ...] }
"""
from __future__ import annotations
import logging
import os

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from bizname_generator.common.config import load_settings
from bizname_generator.common.logging_setup import setup_logging
from bizname_generator.common.schema import Failure, GenerationRequest, Tone
from bizname_generator.common.templates import PLACEHOLDERS, load_template
from bizname_generator.pipeline.completion import CompletionClient
from bizname_generator.pipeline.orchestrator import generate as run_pipeline

LOGGER = logging.getLogger("bizname.serve.app")
setup_logging(os.getenv("LOG_LEVEL", "INFO"))

SETTINGS = load_settings()

class GenerateIn(BaseModel):
    description: str
    keywords: str = ""
    tones: list[Tone] = []

class NameOut(BaseModel):
    name: str
    explanation: str
    category: str

class GenerateOut(BaseModel):
    names: list[NameOut]
    title: str
    message: str

app = FastAPI()

@app.on_event("startup")
def _check_config_on_startup() -> None:
    """Warn about a malformed prompt template or a missing api key."""
    try:
        template = load_template()
        missing = [p for p in PLACEHOLDERS if p not in template]
        if missing:
            LOGGER.warning("Prompt template missing placeholders: %s", ", ".join(missing))
    except OSError as e:
        LOGGER.warning("Failed to read prompt template: %s", e)
    if not SETTINGS.api_key:
        LOGGER.warning("GEMINI_API_KEY is not set; completion requests will be rejected upstream")

def get_client() -> CompletionClient:
    return CompletionClient(SETTINGS)

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": SETTINGS.model_id}

def _status_for(failure: Failure) -> int:
    if failure.kind.is_validation:
        return 422
    if failure.kind.is_transport:
        return 502
    return 500

@app.post("/generate", response_model=GenerateOut)
async def generate(body: GenerateIn, client: CompletionClient = Depends(get_client)) -> GenerateOut:
    request = GenerationRequest(description=body.description, keywords=body.keywords, tones=tuple(body.tones))
    result = await run_pipeline(request, client=client)

    if isinstance(result, Failure):
        raise HTTPException(
            status_code=_status_for(result),
            detail={"kind": result.kind.value, "title": result.title, "message": result.message},
        )

    return GenerateOut(
        names=[NameOut(**n.to_dict()) for n in result.names],
        title=result.title,
        message=result.message,
    )
