"""Failure message rendering.

Templates are scanned left to right. Three kinds of placeholders are
recognized:

    {0}, {1}, ...      positional arguments, rendered with format_value()
    {reason}           the normalized "because" clause, or nothing
    {context:<label>}  the subject's label, falling back to <label>

Literal braces are written as ``{{`` and ``}}``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Sequence

import numpy as np

from fluentcheck.config import DEFAULT_CONFIG, FormatterConfig
from fluentcheck.errors import TemplateError

_TOKEN = re.compile(r"\{\{|\}\}|\{([^{}]*)\}|[{}]")
_BECAUSE = "because"


@dataclass(frozen=True)
class Deferred:
    """An argument computed only when a failure message is rendered."""

    factory: Callable[[], Any]

    def resolve(self) -> Any:
        return self.factory()


def defer(factory: Callable[[], Any]) -> Deferred:
    return Deferred(factory)


def format_value(value: Any, config: FormatterConfig = DEFAULT_CONFIG) -> str:
    """Render a single value the way it should appear in a failure message."""
    if isinstance(value, Deferred):
        value = value.resolve()
    if value is None:
        return config.null_literal
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, np.ndarray):
        value = value.tolist()

    if isinstance(value, bool):
        return str(value)
    if isinstance(value, str):
        return f'"{value}"' if config.quote_strings else value
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (int, Decimal, Fraction)):
        return str(value)
    if isinstance(value, Mapping):
        items = [
            f"{format_value(k, config)}: {format_value(v, config)}"
            for k, v in value.items()
        ]
        return _join(items, config)
    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        return _join((format_value(item, config) for item in value), config)
    return str(value)


def _join(rendered: Iterable[str], config: FormatterConfig) -> str:
    parts: list[str] = []
    for index, text in enumerate(rendered):
        if index == config.max_items:
            parts.append("…")
            break
        parts.append(text)
    return "{" + ", ".join(parts) + "}"


def normalize_reason(
    phrase: str | None,
    reason_args: Sequence[Any] = (),
    config: FormatterConfig = DEFAULT_CONFIG,
) -> str:
    """Turn a caller's justification into a clause starting with "because".

    Returns an empty string when there is no justification. Positional
    placeholders in the phrase are only substituted when arguments are given,
    and string arguments are inserted without quotes.
    """
    if not phrase:
        return ""
    if reason_args:
        plain = config.model_copy(update={"quote_strings": False})
        phrase = _substitute(phrase, reason_args, plain, reason="", context_label=None)
    phrase = phrase.strip()
    if not phrase:
        return ""
    if not phrase.lower().startswith(_BECAUSE):
        phrase = f"{_BECAUSE} {phrase}"
    return phrase


def render(
    template: str,
    args: Sequence[Any] = (),
    reason: str = "",
    context_label: str | None = None,
    *,
    config: FormatterConfig = DEFAULT_CONFIG,
) -> str:
    """Render a failure message template.

    Raises TemplateError for unknown placeholders, unbalanced braces, or a
    positional index that has no matching argument.
    """
    return _substitute(
        template,
        args,
        config,
        reason=normalize_reason(reason, config=config),
        context_label=context_label,
    )


def _substitute(
    template: str,
    args: Sequence[Any],
    config: FormatterConfig,
    *,
    reason: str,
    context_label: str | None,
) -> str:
    out: list[str] = []
    position = 0
    for match in _TOKEN.finditer(template):
        out.append(template[position : match.start()])
        position = match.end()
        token = match.group(0)

        if token == "{{":
            out.append("{")
        elif token == "}}":
            out.append("}")
        elif match.group(1) is None:
            raise TemplateError(
                f"Unbalanced '{token}' at offset {match.start()} in template {template!r}"
            )
        else:
            out.append(
                _expand(match.group(1), args, config, reason, context_label, template)
            )

    out.append(template[position:])
    return "".join(out)


def _expand(
    name: str,
    args: Sequence[Any],
    config: FormatterConfig,
    reason: str,
    context_label: str | None,
    template: str,
) -> str:
    if name.isdecimal() and name.isascii():
        index = int(name)
        if index >= len(args):
            raise TemplateError(
                f"Template {template!r} references argument {{{index}}} "
                f"but only {len(args)} argument(s) were supplied"
            )
        return format_value(args[index], config)

    if name == "reason":
        return f" {reason}" if reason else ""

    if name == "context" or name.startswith("context:"):
        if context_label:
            return context_label
        _, _, label = name.partition(":")
        return label or config.default_context

    raise TemplateError(f"Unknown placeholder {{{name}}} in template {template!r}")
