from __future__ import annotations

import pytest

from bizname_generator.common.errors import MissingDescription, MissingTone
from bizname_generator.common.schema import GenerationRequest, Tone
from bizname_generator.pipeline.validation import validate


@pytest.mark.parametrize("description", ["", "   ", "\n\t "])
def test_blank_description_rejected(description: str) -> None:
    with pytest.raises(MissingDescription):
        validate(GenerationRequest(description=description, tones=(Tone.FUNNY,)))


def test_empty_tones_rejected() -> None:
    with pytest.raises(MissingTone):
        validate(GenerationRequest(description="A bakery"))


def test_description_checked_before_tones() -> None:
    with pytest.raises(MissingDescription):
        validate(GenerationRequest(description=" "))


def test_valid_request_returned_unchanged() -> None:
    request = GenerationRequest(description="  A bakery  ", keywords="bread", tones=(Tone.CATCHY,))
    assert validate(request) is request
    assert request.description == "  A bakery  "


def test_tones_coerced_and_deduplicated_in_order() -> None:
    request = GenerationRequest(description="x", tones=("Funny", Tone.CATCHY, "Funny"))
    assert request.tones == (Tone.FUNNY, Tone.CATCHY)


def test_unknown_tone_raises() -> None:
    with pytest.raises(ValueError):
        GenerationRequest(description="x", tones=("Sarcastic",))
