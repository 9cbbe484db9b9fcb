"""Input checks that run before any network work."""
from __future__ import annotations

from bizname_generator.common.errors import MissingDescription, MissingTone
from bizname_generator.common.schema import GenerationRequest


def validate(request: GenerationRequest) -> GenerationRequest:
    """Return the request unchanged, or raise MissingDescription / MissingTone."""
    if not request.description.strip():
        raise MissingDescription("description is empty")
    if not request.tones:
        raise MissingTone("no tone selected")
    return request
