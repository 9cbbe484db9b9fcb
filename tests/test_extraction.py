from __future__ import annotations

import json

import pytest

from bizname_generator.common.errors import InvalidJson, NoJsonFound
from bizname_generator.common.schema import GeneratedName
from bizname_generator.pipeline.extraction import extract, find_json_span

NAMES = [
    {"name": "Domainly", "explanation": "short and clear", "category": "Descriptive"},
    {"name": "Name That Tune", "explanation": "a familiar phrase", "category": "Phrase-based"},
    {"name": "Domain Squeeze", "explanation": "a pun on lemon squeeze", "category": "Humorous"},
]


@pytest.mark.parametrize(
    "prefix,suffix",
    [
        ("", ""),
        ("Here you go: ", " Hope this helps!"),
        ("```json\n", "\n```"),
        ("Sure!\n\n", "\n\nLet me know if you need more."),
    ],
)
def test_recovers_embedded_names(prefix: str, suffix: str) -> None:
    raw = prefix + json.dumps({"names": NAMES}) + suffix
    names = extract(raw)
    assert [n.to_dict() for n in names] == NAMES


def test_span_is_first_open_to_last_close() -> None:
    raw = 'intro {"names": [{"name": "A"}]} outro }'
    assert find_json_span(raw) == '{"names": [{"name": "A"}]} outro }'


def test_text_without_braces_raises_no_json_found() -> None:
    with pytest.raises(NoJsonFound):
        extract("I could not think of any names, sorry.")


def test_only_opening_brace_raises_no_json_found() -> None:
    with pytest.raises(NoJsonFound):
        extract('{"names": [')


def test_broken_json_raises_invalid_json() -> None:
    with pytest.raises(InvalidJson):
        extract('Result: {"names": [{"name": "A",}] }')


def test_two_objects_with_prose_between_is_invalid_json() -> None:
    with pytest.raises(InvalidJson):
        extract('{"names": []} and also {"names": []}')


def test_missing_names_key_is_empty_list() -> None:
    assert extract('{"suggestions": [{"name": "A"}]}') == []


def test_null_names_is_empty_list() -> None:
    assert extract('{"names": null}') == []


def test_non_list_names_is_empty_list() -> None:
    assert extract('{"names": "Domainly"}') == []


def test_entries_are_not_validated() -> None:
    raw = '{"names": [{"name": "OnlyName"}, {"category": "Weird"}, {}, "stray", {"name": 7}]}'
    names = extract(raw)
    assert names == [
        GeneratedName(name="OnlyName"),
        GeneratedName(category="Weird"),
        GeneratedName(),
        GeneratedName(),
        GeneratedName(name="7"),
    ]


def test_count_is_not_enforced() -> None:
    raw = json.dumps({"names": [{"name": f"N{i}", "explanation": "", "category": ""} for i in range(13)]})
    assert len(extract(raw)) == 13


def test_non_object_entries_keep_their_position() -> None:
    names = extract('{"names": [1, {"name": "Second"}, null]}')
    assert names == [GeneratedName(), GeneratedName(name="Second"), GeneratedName()]


def test_deeply_nested_reply_raises_invalid_json() -> None:
    depth = 100000
    with pytest.raises(InvalidJson):
        extract('{"names": ' + "[" * depth + "]" * depth + "}")
