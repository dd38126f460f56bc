from __future__ import annotations

import re
from typing import List, NamedTuple


LEADING_SPACE_RE = re.compile(r'^(\s+)')


class Tokens(NamedTuple):
    classes: List[str]
    # joins classes back together: ' ' for one line, '\n' + indent otherwise
    separator: str


def tokenize(value: str) -> Tokens:
    if '\n' not in value:
        return Tokens(value.split(), ' ')

    lines = value.split('\n')
    m = LEADING_SPACE_RE.match(lines[1])
    separator = '\n' + m.group(1) if m else '\n '

    classes: List[str] = []
    for line in lines:
        # a physical line may still hold several classes
        classes.extend(line.split())
    return Tokens(classes, separator)
