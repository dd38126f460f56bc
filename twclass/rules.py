from __future__ import annotations

import re
from typing import NamedTuple, Optional, Tuple


class GroupRule(NamedTuple):
    main: Tuple[str, ...]
    related: Tuple[str, ...]


# Order of `related` is the order companions are emitted after their main class.
GROUPS: Tuple[GroupRule, ...] = (
    GroupRule(
        main=('bg-gradient',),
        related=('from', 'via', 'to'),
    ),
    GroupRule(
        main=('static', 'fixed', 'absolute', 'relative', 'sticky'),
        related=('top', 'right', 'bottom', 'left', 'inset'),
    ),
    GroupRule(
        main=('flex', 'inline-flex'),
        related=('grow', 'shrink', 'justify', 'content', 'items'),
    ),
    GroupRule(
        main=('grid', 'inline-grid'),
        related=(
            'grid-cols',
            'grid-rows',
            'grid-flow',
            'auto-cols',
            'auto-rows',
            'gap',
            'justify',
            'content',
            'col-span',
            'place-content',
            'place-items',
        ),
    ),
)

# smallest to largest; index + 1 is the rank, 0 means no breakpoint
BREAKPOINTS: Tuple[str, ...] = ('sm', 'md', 'lg', 'xl', '2xl')

MARKER_RE = re.compile(r'^[!-]+')
MODIFIER_CHAIN_RE = re.compile(r'^[!-]*((?:[A-Za-z0-9]+:)+)')
# markers and modifiers stripped, whatever is left is the class proper
BARE_CLASS_RE = re.compile(r'^[!-]*(?:[A-Za-z0-9]+:)*[!-]*(.*)$', re.S)


def strip_markers(cls: str) -> str:
    return MARKER_RE.sub('', cls.strip())


def has_modifier(cls: str) -> bool:
    return MODIFIER_CHAIN_RE.match(cls.strip()) is not None


def bare_class(cls: str) -> str:
    m = BARE_CLASS_RE.match(cls.strip())
    return m.group(1) if m else cls


def dash_prefix(cls: str) -> str:
    return strip_markers(cls).split('-', 1)[0]


def breakpoint_rank(cls: str) -> int:
    """Rank of the first breakpoint in the modifier chain (0 when there is none)."""
    m = MODIFIER_CHAIN_RE.match(cls.strip())
    if not m:
        return 0
    for segment in m.group(1).split(':'):
        if segment in BREAKPOINTS:
            return BREAKPOINTS.index(segment) + 1
    return 0


def matches_related(cls: str, prefix: str) -> bool:
    bare = bare_class(cls)
    return bare == prefix or bare.startswith(prefix + '-')


def is_main_of(cls: str, rule: GroupRule) -> bool:
    stripped = strip_markers(cls)
    return any(stripped.startswith(m) for m in rule.main)


def is_related_of(cls: str, rule: GroupRule) -> bool:
    return any(matches_related(cls, prefix) for prefix in rule.related)


def rule_for_main(cls: str) -> Optional[GroupRule]:
    for rule in GROUPS:
        if is_main_of(cls, rule):
            return rule
    return None
