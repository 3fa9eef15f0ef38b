"""Stub template model: literal text, named slots and ``[[TOKEN]]`` placeholders.

A stub is parsed once into an ordered list of :class:`Text` and :class:`Slot`
segments. Rendering first resolves every slot to a fragment (or nothing) and
then runs a single token substitution pass over the joined text, so token
values are never substituted twice.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from .errors import TemplateRenderingError

__all__ = [
    "Slot",
    "Template",
    "TemplateRenderingError",
    "Text",
    "substitute_tokens",
]


_SLOT_PATTERN = re.compile(r"{{\s*(?P<name>[a-z][a-z0-9_]*)\s*}}")
_TOKEN_PATTERN = re.compile(r"\[\[(?P<token>[A-Z][A-Z0-9_]*)\]\]")

_MISSING_POLICIES = {"keep", "empty", "error"}


@dataclass(frozen=True, slots=True)
class Text:
    """Literal run of template text."""

    text: str


@dataclass(frozen=True, slots=True)
class Slot:
    """Named hole filled by a fragment or left empty."""

    name: str


Segment = Text | Slot


def _check_policy(missing: str) -> None:
    if missing not in _MISSING_POLICIES:
        raise ValueError("missing must be 'keep', 'empty', or 'error'")


def substitute_tokens(text: str, tokens: Mapping[str, str], *, missing: str = "keep") -> str:
    """Replace ``[[TOKEN]]`` placeholders in ``text`` in a single pass.

    ``missing`` controls unknown tokens: ``"keep"`` leaves them in place,
    ``"empty"`` removes them and ``"error"`` raises
    :class:`TemplateRenderingError`.
    """

    _check_policy(missing)

    def substitute(match: re.Match[str]) -> str:
        token = match.group("token")
        if token in tokens:
            return str(tokens[token])
        if missing == "keep":
            return match.group(0)
        if missing == "empty":
            return ""
        raise TemplateRenderingError(f"missing value for token '{token}'")

    return _TOKEN_PATTERN.sub(substitute, text)


@dataclass(frozen=True, slots=True)
class Template:
    """Parsed stub made of literal text and named slots."""

    segments: tuple[Segment, ...]

    @classmethod
    def parse(cls, text: str) -> "Template":
        segments: list[Segment] = []
        position = 0
        for match in _SLOT_PATTERN.finditer(text):
            if match.start() > position:
                segments.append(Text(text[position : match.start()]))
            segments.append(Slot(match.group("name")))
            position = match.end()
        if position < len(text):
            segments.append(Text(text[position:]))
        return cls(tuple(segments))

    @property
    def slots(self) -> tuple[str, ...]:
        """Slot names in order of first appearance."""

        names: dict[str, None] = {}
        for segment in self.segments:
            if isinstance(segment, Slot):
                names.setdefault(segment.name)
        return tuple(names)

    def resolve(self, fragments: Mapping[str, str] | None = None) -> str:
        """Join the segments, filling slots from ``fragments`` or with nothing.

        Fragments naming a slot the template does not declare raise
        :class:`TemplateRenderingError`.
        """

        fragments = fragments or {}
        unknown = sorted(set(fragments) - set(self.slots))
        if unknown:
            raise TemplateRenderingError(f"unknown slot(s): {', '.join(unknown)}")

        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, Slot):
                parts.append(fragments.get(segment.name, ""))
            else:
                parts.append(segment.text)
        return "".join(parts)

    def render(
        self,
        tokens: Mapping[str, str],
        fragments: Mapping[str, str] | None = None,
        *,
        missing: str = "keep",
    ) -> str:
        """Resolve slots, then substitute tokens once over the result."""

        return substitute_tokens(self.resolve(fragments), tokens, missing=missing)
