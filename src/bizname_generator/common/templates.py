"""Prompt templating helpers."""
from __future__ import annotations
import re
from functools import lru_cache
from pathlib import Path

from bizname_generator.common.schema import GenerationRequest

DEFAULT_TEMPLATE_PATH = Path(__file__).with_name("prompt_template.txt")
PLACEHOLDERS = ("{{description}}", "{{keywords}}", "{{tones}}")
TONE_SEPARATOR = " / "
_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")

@lru_cache(maxsize=8)
def load_template(path: str | Path = DEFAULT_TEMPLATE_PATH) -> str:
    """
    Load a prompt template file. Each path is read once per process.

    Args:
        path: Path to template.
    """
    return Path(path).read_text(encoding="utf-8")

def render_prompt(template: str, **fields: str) -> str:
    """
    Render fields into the template.

    Args:
        template: Template content containing {{name}} placeholders.
        fields: Values keyed by placeholder name.

    Returns:
        Rendered prompt. Unknown placeholders are left as they are.
    """
    # single pass: user text containing "{{...}}" is never expanded
    return _PLACEHOLDER_RE.sub(lambda m: fields.get(m.group(1), m.group(0)), template)

def build_prompt(request: GenerationRequest, template: str | None = None) -> str:
    """Render a validated request into the naming instruction sent to the model."""
    if template is None:
        template = load_template()
    return render_prompt(
        template,
        description=request.description,
        keywords=request.keywords,
        tones=TONE_SEPARATOR.join(t.value for t in request.tones),
    )
