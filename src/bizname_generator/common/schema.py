"""Dataclasses and enums for requests, generated names and pipeline results."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Union


class Tone(str, Enum):
    """Tone preferences a user can select for their names."""
    DESCRIPTIVE = "Descriptive"
    FUNNY = "Funny"
    TRENDY = "Trendy"
    CATCHY = "Catchy"
    PROFESSIONAL = "Professional"


class FailureKind(str, Enum):
    MISSING_DESCRIPTION = "missing_description"
    MISSING_TONE = "missing_tone"
    HTTP_STATUS = "http_status"
    NETWORK_UNAVAILABLE = "network_unavailable"
    MALFORMED_ENVELOPE = "malformed_envelope"
    NO_JSON_FOUND = "no_json_found"
    INVALID_JSON = "invalid_json"

    @property
    def is_validation(self) -> bool:
        return self in (FailureKind.MISSING_DESCRIPTION, FailureKind.MISSING_TONE)

    @property
    def is_transport(self) -> bool:
        return self in (FailureKind.HTTP_STATUS, FailureKind.NETWORK_UNAVAILABLE)


def _dedupe_tones(tones: Iterable[Tone | str]) -> tuple[Tone, ...]:
    # dict keeps insertion order, so the first selection wins
    return tuple(dict.fromkeys(Tone(t) for t in tones))


@dataclass(frozen=True)
class GenerationRequest:
    """
    User input for one generation.

    Args:
        description: Free-text business description.
        keywords: Optional keywords, embedded verbatim.
        tones: Selected tones in selection order.
    """
    description: str
    keywords: str = ""
    tones: tuple[Tone, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tones", _dedupe_tones(self.tones))


@dataclass
class GeneratedName:
    """One name suggestion as returned by the model. Fields may be empty."""
    name: str = ""
    explanation: str = ""
    category: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratedName":
        def _text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            name=_text("name"),
            explanation=_text("explanation"),
            category=_text("category"),
        )

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "explanation": self.explanation, "category": self.category}


@dataclass
class Success:
    names: list[GeneratedName] = field(default_factory=list)
    title: str = "Names Generated!"
    message: str = "Here are your millionaire-strategy business names."

    @property
    def ok(self) -> bool:
        return True


@dataclass
class Failure:
    """
    A classified pipeline failure.

    `title` and `message` are safe to show to the user; `detail` holds the
    diagnostic cause and `status` the upstream HTTP status, when known.
    """
    kind: FailureKind
    title: str
    message: str
    detail: str = ""
    status: int | None = None

    @property
    def ok(self) -> bool:
        return False


PipelineResult = Union[Success, Failure]
