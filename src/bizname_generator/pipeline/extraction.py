"""Recover the names payload from a free-form model reply.

The model tends to wrap its JSON in commentary, so the object is located as
the span from the first "{" to the last "}" and parsed as a whole. Entries
are trusted as returned: no field, count or category checks.

Two shapes deviate from passing `names` through untouched, on purpose, so the
result is always a list of GeneratedName: a `names` value that is not a list
yields [], and an entry that is not an object becomes an empty GeneratedName
in its original position.
"""
from __future__ import annotations
import json
import logging
import re

from bizname_generator.common.errors import InvalidJson, NoJsonFound
from bizname_generator.common.schema import GeneratedName

LOGGER = logging.getLogger("bizname.pipeline.extraction")

_JSON_SPAN_RE = re.compile(r"\{.*\}", re.DOTALL)


def find_json_span(raw_text: str) -> str:
    match = _JSON_SPAN_RE.search(raw_text)
    if match is None:
        raise NoJsonFound("no {...} span in model reply")
    return match.group(0)


def extract(raw_text: str) -> list[GeneratedName]:
    """
    Parse the names list out of a model reply.

    Args:
        raw_text: Completion text, possibly with leading/trailing prose.

    Returns:
        Names in reply order; empty when the object has no usable `names`.
    """
    span = find_json_span(raw_text)
    try:
        parsed = json.loads(span)
    except json.JSONDecodeError as e:
        raise InvalidJson(f"{e.msg} at line {e.lineno} column {e.colno}") from e
    except RecursionError as e:
        raise InvalidJson("JSON nested too deeply") from e

    names = parsed.get("names")
    if names is None:
        return []
    if not isinstance(names, list):
        LOGGER.warning("Ignoring non-list names field of type %s", type(names).__name__)
        return []

    out: list[GeneratedName] = []
    for item in names:
        if not isinstance(item, dict):
            LOGGER.warning("Non-object names entry kept as an empty name: %r", item)
            out.append(GeneratedName())
            continue
        out.append(GeneratedName.from_dict(item))
    return out
