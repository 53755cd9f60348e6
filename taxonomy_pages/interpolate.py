"""Expand ``:token`` placeholders in output path templates.

Path templates use a deliberately tiny grammar: a colon followed by one or
more word characters names a field on the record being rendered. Anything
else in the template is copied through verbatim.

Examples
--------
>>> interpolate(":categoryPath/page/:num/index.html", {"categoryPath": "news", "num": 2})
'news/page/2/index.html'
>>> trim_permalink("news/index.html")
'news'
"""

from __future__ import annotations

import re
import typing as typ

from ._constants import PERMALINK_SUFFIX

TOKEN_PATTERN = re.compile(r":(\w+)")


def interpolate(template: str, data: typ.Mapping[str, typ.Any]) -> str:
    """Replace each ``:name`` token with ``str(data[name])``.

    Tokens without a matching (or with a ``None``) value expand to an empty
    string rather than raising.
    """

    def _replace(match: re.Match[str]) -> str:
        value = data.get(match.group(1))
        if value is None:
            return ""
        return str(value)

    return TOKEN_PATTERN.sub(_replace, template)


def trim_permalink(path: str) -> str:
    """Strip a trailing ``/index.html`` so the path reads as a clean link."""
    if path.endswith(PERMALINK_SUFFIX):
        return path[: -len(PERMALINK_SUFFIX)]
    return path


__all__ = ["TOKEN_PATTERN", "interpolate", "trim_permalink"]
