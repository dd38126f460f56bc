"""Locate literal ``class="..."`` attributes in HTML/Vue sources and apply fixes.

Elements are found with BeautifulSoup, which also reports where each opening
tag starts. The attribute itself is then read from the raw opening tag so the
original text, quotes and positions are kept exactly as written.
"""
from __future__ import annotations

import bisect
import logging
import re
from typing import Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup

from .config import Options
from .report import RULES, Attribute, Fix


logger = logging.getLogger(__name__)

# opening tag, quoted attribute values may contain '>'
OPEN_TAG_RE = re.compile(r'<[^\s>/!?]+(?:"[^"]*"|\'[^\']*\'|[^\'">])*>')
# plain `class` only: `:class` / `v-bind:class` / `data-class` are not preceded by whitespace
CLASS_ATTR_RE = re.compile(r'(?<=\s)class\s*=\s*"([^"]*)"', re.I)


def _line_starts(source: str) -> List[int]:
    starts = [0]
    for m in re.finditer('\n', source):
        starts.append(m.end())
    return starts


def _position(starts: List[int], offset: int) -> Tuple[int, int]:
    """1-based line and 0-based column of an offset."""
    idx = bisect.bisect_right(starts, offset) - 1
    return idx + 1, offset - starts[idx]


def find_class_attributes(source: str) -> List[Attribute]:
    soup = BeautifulSoup(source, 'html.parser')
    starts = _line_starts(source)
    lines = source.split('\n')
    attrs: List[Attribute] = []

    for tag in soup.find_all(True):
        if tag.sourceline is None:
            continue
        tag_line, tag_col = tag.sourceline, tag.sourcepos
        tag_offset = starts[tag_line - 1] + tag_col
        m = OPEN_TAG_RE.match(source, tag_offset)
        if not m:
            logger.debug('no opening tag text for <%s> at %d:%d', tag.name, tag_line, tag_col)
            continue
        cm = CLASS_ATTR_RE.search(m.group(0))
        if not cm:
            continue

        attr_line, attr_col = _position(starts, tag_offset + cm.start())
        value_start = tag_offset + cm.start(1) - 1
        value_end = tag_offset + cm.end(1) + 1
        line, column = _position(starts, value_start)

        # indentation is measured from the element when it shares the attribute's line
        if tag_line == attr_line:
            indentation = lines[tag_line - 1][:tag_col]
        else:
            indentation = lines[attr_line - 1][:attr_col]

        logger.debug('class attribute on <%s> at %d:%d', tag.name, line, column)
        attrs.append(Attribute(cm.group(1), value_start, value_end, line, column, indentation))
    return attrs


def fix_attribute(attr: Attribute, rules: Iterable[str], options: Options) -> Tuple[Optional[str], List[Fix]]:
    """Run rules in order, each on the output of the previous one."""
    fixes: List[Fix] = []
    current = attr
    for name in rules:
        fix = RULES[name](current, options)
        if fix is None:
            continue
        fixes.append(fix)
        current = current.with_value(fix.text[1:-1])
    if not fixes:
        return None, fixes
    return f'"{current.value}"', fixes


def fix_source(source: str, rules: Iterable[str] = ('sort', 'multiline'), options: Optional[Options] = None) -> Tuple[str, List[Fix]]:
    options = options or Options()
    rules = list(rules)
    unknown = [r for r in rules if r not in RULES]
    if unknown:
        raise ValueError(f'unknown rule(s): {", ".join(unknown)}')

    replacements: List[Tuple[int, int, str]] = []
    fixes: List[Fix] = []
    for attr in find_class_attributes(source):
        text, attr_fixes = fix_attribute(attr, rules, options)
        fixes.extend(attr_fixes)
        if text is not None:
            replacements.append((attr.start, attr.end, text))

    out = source
    for start, end, text in sorted(replacements, reverse=True):
        out = out[:start] + text + out[end:]
    return out, fixes
