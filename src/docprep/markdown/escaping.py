"""Escape MDX-sensitive characters while leaving code untouched.

MDX reads ``{...}`` as a JSX expression and ``<`` as the start of a JSX tag.
Architecture notes routinely contain both as prose (``<50ms``, ``{region}``),
so they are escaped everywhere except inside fenced code blocks and inline
code spans, which are swapped out for placeholder tokens first and restored
verbatim at the end.
"""

from __future__ import annotations

import re

_FENCED_BLOCK = re.compile(r"```[\s\S]*?```")
_INLINE_CODE = re.compile(r"`[^`]+`")
_BRACED = re.compile(r"\{([^}]+)\}")
# A "<" that does not open a tag, closing tag or comment/doctype.
_BARE_LESS_THAN = re.compile(r"<(?![a-zA-Z/!])")

_CODE_BLOCK_TOKEN = "__CODE_BLOCK_{index}__"
_INLINE_CODE_TOKEN = "__INLINE_CODE_{index}__"


def _protect(pattern: re.Pattern[str], token: str, text: str) -> tuple[str, list[str]]:
    saved: list[str] = []

    def _stash(match: re.Match[str]) -> str:
        saved.append(match.group(0))
        return token.format(index=len(saved) - 1)

    return pattern.sub(_stash, text), saved


def _restore(text: str, token: str, saved: list[str]) -> str:
    for index, original in enumerate(saved):
        text = text.replace(token.format(index=index), original, 1)
    return text


def escape_mdx(content: str) -> str:
    """Return ``content`` with braces and bare ``<`` escaped outside code regions.

    Applied once per pipeline run; running it again on its own output is not
    expected to be a no-op.

    Examples:
        >>> escape_mdx("Latency < 50ms")
        'Latency \\\\< 50ms'
        >>> escape_mdx("Use `{x}` not {y}")
        'Use `{x}` not \\\\{y\\\\}'

    """
    processed, code_blocks = _protect(_FENCED_BLOCK, _CODE_BLOCK_TOKEN, content)
    processed, inline_code = _protect(_INLINE_CODE, _INLINE_CODE_TOKEN, processed)

    processed = _BRACED.sub(lambda m: "\\{" + m.group(1) + "\\}", processed)
    processed = _BARE_LESS_THAN.sub(lambda _m: "\\<", processed)

    processed = _restore(processed, _INLINE_CODE_TOKEN, inline_code)
    return _restore(processed, _CODE_BLOCK_TOKEN, code_blocks)


__all__ = ["escape_mdx"]
