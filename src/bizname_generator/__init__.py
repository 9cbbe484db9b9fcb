"""
Business name generator package.

Provides:
- A name-generation pipeline (validate, prompt, Gemini completion, JSON extraction)
- A FastAPI surface exposing the pipeline over HTTP
"""
from bizname_generator.common.schema import (
    Failure,
    FailureKind,
    GeneratedName,
    GenerationRequest,
    PipelineResult,
    Success,
    Tone,
)
from bizname_generator.pipeline.orchestrator import generate

__all__ = [
    "Failure",
    "FailureKind",
    "GeneratedName",
    "GenerationRequest",
    "PipelineResult",
    "Success",
    "Tone",
    "generate",
]
