"""Placeholder parsing and interpolation for template stencils."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Tuple, Union

from ..errors import TemplateError

logger = logging.getLogger(__name__)

OPEN = "{{"
CLOSE = "}}"


@dataclass(frozen=True)
class Placeholder:
    """Reference to a data field inside a parsed template."""

    key: str


Segment = Union[str, Placeholder]


def _extract_key(token: str, position: int) -> str:
    """
    Normalize the raw text between ``{{`` and ``}}`` into a field key.

    Whitespace around the key is ignored and a single leading ``.`` is accepted,
    so ``{{name}}``, ``{{ name }}`` and ``{{ .name }}`` all reference ``name``.

    Raises:
        TemplateError: If the placeholder is empty or contains braces.
    """
    key = token.strip()
    if key.startswith("."):
        key = key[1:].strip()
    if not key:
        raise TemplateError(f"empty placeholder at offset {position}")
    if "{" in key or "}" in key:
        raise TemplateError(f"unexpected brace in placeholder at offset {position}")
    return key


def parse_template(template: str) -> Tuple[Segment, ...]:
    """
    Split ``template`` into literal text and placeholder segments.

    A ``}}`` outside a placeholder is kept as literal text.

    Raises:
        TemplateError: On an unterminated ``{{`` or a malformed placeholder.
    """
    segments: List[Segment] = []
    index = 0
    length = len(template)

    while index < length:
        start = template.find(OPEN, index)
        if start == -1:
            segments.append(template[index:])
            break
        segments.append(template[index:start])
        end = template.find(CLOSE, start + len(OPEN))
        if end == -1:
            raise TemplateError(f"unterminated placeholder at offset {start}")
        key = _extract_key(template[start + len(OPEN):end], start)
        segments.append(Placeholder(key))
        index = end + len(CLOSE)

    return tuple(segment for segment in segments if segment != "")


def placeholder_keys(template: str) -> Tuple[str, ...]:
    """Return the field keys referenced by ``template`` in order of appearance."""
    return tuple(
        segment.key for segment in parse_template(template) if isinstance(segment, Placeholder)
    )


def render_template(template: str, values: Mapping[str, str]) -> str:
    """
    Interpolate ``values`` into ``template``.

    Placeholders naming a key absent from ``values`` render as an empty string.

    Raises:
        TemplateError: If ``template`` is malformed.
    """
    if not template:
        logger.debug("Rendering empty template")
        return ""
    result: List[str] = []
    for segment in parse_template(template):
        if isinstance(segment, Placeholder):
            value = values.get(segment.key)
            if value is None:
                logger.debug("Template key %r missing from data; rendering empty", segment.key)
                continue
            result.append(str(value))
        else:
            result.append(segment)
    return "".join(result)


__all__ = ["Placeholder", "parse_template", "placeholder_keys", "render_template"]
