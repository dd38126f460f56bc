from __future__ import annotations

from typing import Callable, Dict, NamedTuple, Optional

from .config import Options
from .multiline import MULTI_LINE, LayoutContext, join_classes
from .sorter import sort_tokens
from .tokenizer import tokenize


MSG_NOT_SORTED = 'Classes are not sorted'
MSG_MULTIPLE_LINES = 'Classes should be in multiple lines'
MSG_SINGLE_LINE = 'Classes should be in a single line'


class Attribute(NamedTuple):
    """A literal ``class="..."`` value as located in a document."""
    value: str
    # offsets of the quoted value, quotes included
    start: int
    end: int
    # 1-based line / 0-based column of the opening quote
    line: int
    column: int
    indentation: str

    @property
    def context(self) -> LayoutContext:
        return LayoutContext(self.indentation, self.column)

    def with_value(self, value: str) -> 'Attribute':
        return self._replace(value=value)


class Fix(NamedTuple):
    rule: str
    message: str
    start: int
    end: int
    text: str
    line: int
    column: int


def _fix(rule: str, message: str, attr: Attribute, value: str) -> Fix:
    return Fix(rule, message, attr.start, attr.end, f'"{value}"', attr.line, attr.column)


def check_sort(attr: Attribute, options: Optional[Options] = None) -> Optional[Fix]:
    tokens = tokenize(attr.value)
    if not tokens.classes:
        return None
    sorted_value = tokens.separator.join(sort_tokens(tokens.classes))
    if attr.value.strip() == sorted_value.strip():
        return None
    return _fix('sort', MSG_NOT_SORTED, attr, sorted_value)


def check_multiline(attr: Attribute, options: Optional[Options] = None) -> Optional[Fix]:
    classes = tokenize(attr.value).classes
    if not classes:
        return None
    layout = join_classes(classes, attr.context, options or Options())
    if attr.value == layout.text:
        return None
    message = MSG_MULTIPLE_LINES if layout.kind == MULTI_LINE else MSG_SINGLE_LINE
    return _fix('multiline', message, attr, layout.text)


RULES: Dict[str, Callable[[Attribute, Optional[Options]], Optional[Fix]]] = {
    'sort': check_sort,
    'multiline': check_multiline,
}
