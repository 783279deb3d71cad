"""Sanitize free-form identifiers (container names, labels) into rule-safe keys."""

from __future__ import annotations

import re
from typing import Final

# ``\W`` is Unicode-aware for ``str`` patterns; ``_`` counts as a word character
# there, so it is listed explicitly.
_SEPARATOR_RUN: Final = re.compile(r"[\W_]+")


def normalize(name: str) -> str:
    """Replace every run of characters that are neither letters nor numbers with ``-``.

    Leading and trailing runs are dropped rather than turned into separators::

        >>> normalize("foo_bar!!baz 123")
        'foo-bar-baz-123'
        >>> normalize("--web.1--")
        'web-1'
    """

    return "-".join(part for part in _SEPARATOR_RUN.split(name) if part)
