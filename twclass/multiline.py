from __future__ import annotations

from typing import List, NamedTuple

from .config import Options
from .tokenizer import tokenize


SINGLE_LINE = 'single-line'
MULTI_LINE = 'multi-line'


class LayoutContext(NamedTuple):
    # text of the reference line before the reference column
    indentation: str
    # 0-based column of the value's opening quote
    value_column: int


class Layout(NamedTuple):
    kind: str
    text: str


def projected_length(classes: List[str], context: LayoutContext) -> int:
    """Width of the attribute value if every class stayed on one line (quotes included)."""
    is_tabbed = '\t' in context.indentation
    space_size = 4 if is_tabbed else 1
    return len(' '.join(classes)) + 2 + space_size * len(context.indentation) + context.value_column


def join_classes(classes: List[str], context: LayoutContext, options: Options) -> Layout:
    if projected_length(classes, context) <= options.max_len:
        return Layout(SINGLE_LINE, ' '.join(classes))

    if '\t' in context.indentation:
        indent = '\t' * (len(context.indentation) + 1)
    else:
        indent = ' ' * (len(context.indentation) + 4)
    joined = ('\n' + indent).join(classes)
    if options.quotes_on_new_line:
        joined = f"\n{indent}{joined}\n{indent}"
    return Layout(MULTI_LINE, joined)


def wrap_classes(value: str, context: LayoutContext, options: Options = Options()) -> Layout:
    return join_classes(tokenize(value).classes, context, options)
