"""Run one name generation end to end and classify the outcome.

validate -> build_prompt -> complete -> extract. Each call is independent;
nothing is shared between invocations, so several may run concurrently.
"""
from __future__ import annotations
import logging

from bizname_generator.common.config import Settings
from bizname_generator.common.errors import NameGenerationError
from bizname_generator.common.schema import (
    Failure,
    FailureKind,
    GenerationRequest,
    PipelineResult,
    Success,
)
from bizname_generator.common.templates import build_prompt
from bizname_generator.pipeline.completion import CompletionClient
from bizname_generator.pipeline.extraction import extract
from bizname_generator.pipeline.validation import validate

LOGGER = logging.getLogger("bizname.pipeline")

GENERIC_FAILURE = ("Generation Failed", "Failed to generate names. Please try again.")

USER_MESSAGES: dict[FailureKind, tuple[str, str]] = {
    FailureKind.MISSING_DESCRIPTION: (
        "Description Required",
        "Please provide a business description to generate names.",
    ),
    FailureKind.MISSING_TONE: ("Select Tone", "Please select at least one tone preference."),
}


def to_failure(error: NameGenerationError) -> Failure:
    title, message = USER_MESSAGES.get(error.kind, GENERIC_FAILURE)
    return Failure(
        kind=error.kind,
        title=title,
        message=message,
        detail=error.detail,
        status=getattr(error, "status", None),
    )


async def generate(
    request: GenerationRequest,
    client: CompletionClient | None = None,
    settings: Settings | None = None,
) -> PipelineResult:
    """
    Generate business names for a request.

    Args:
        request: User input; validated before any network work.
        client: Completion client to use; built from `settings` when omitted.
        settings: Used only when `client` is not given.

    Returns:
        Success with the parsed names, or a classified Failure.
    """
    try:
        validated = validate(request)
    except NameGenerationError as e:
        LOGGER.info("Request rejected: %s", e.kind.value)
        return to_failure(e)

    prompt = build_prompt(validated)
    if client is None:
        client = CompletionClient(settings)

    try:
        raw_text = await client.complete(prompt)
    except NameGenerationError as e:
        LOGGER.error("Completion failed (%s): %s", e.kind.value, e.detail)
        return to_failure(e)

    try:
        names = extract(raw_text)
    except NameGenerationError as e:
        LOGGER.error("Could not parse model reply (%s): %s | reply=%r", e.kind.value, e.detail, raw_text)
        return to_failure(e)

    LOGGER.info("Generated %d names", len(names))
    return Success(names=names)
