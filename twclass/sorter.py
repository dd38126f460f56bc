"""Canonical ordering of utility classes.

Base classes (no modifier) are walked alphabetically. Each base class is
followed by its modifier variants (``md:p-4`` after ``p-2``) in breakpoint
order, and a class that anchors a layout mode (``flex``, ``grid`` ...) is
followed by its companions in the order declared in ``rules.GROUPS``.
Whatever is left over goes last, again in breakpoint order.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Set

from .rules import GROUPS, breakpoint_rank, dash_prefix, has_modifier, is_main_of, is_related_of, matches_related, rule_for_main
from .tokenizer import tokenize


def sort_by_breakpoint(classes: Iterable[str]) -> List[str]:
    # sorted() is stable, so alphabetic order survives inside a breakpoint
    return sorted(sorted(classes), key=breakpoint_rank)


def _take(pool: List[str], picked: List[str]) -> None:
    for cls in picked:
        pool.remove(cls)


def _main_present(classes: List[str]) -> Set[int]:
    present = set()
    for i, rule in enumerate(GROUPS):
        if any(is_main_of(c, rule) and not is_related_of(c, rule) for c in classes):
            present.add(i)
    return present


def _is_companion(cls: str, present: Set[int]) -> bool:
    return any(is_related_of(cls, GROUPS[i]) for i in present)


def sort_tokens(classes: List[str]) -> List[str]:
    ordered = sorted(classes)
    pool = list(ordered)
    present = _main_present(ordered)
    consumed: Set[str] = set()
    out: List[str] = []

    for cls in ordered:
        if not cls.strip() or cls in consumed or has_modifier(cls):
            continue
        # left for its main class to pick up
        if _is_companion(cls, present):
            continue

        out.append(cls)
        pool.remove(cls)

        prefix = dash_prefix(cls)
        variants = []
        # a bare marker (`!`, `-`) has no variants
        if prefix:
            variant_re = re.compile(r'^[!-]*(?:[A-Za-z0-9]+:)+[!-]*' + re.escape(prefix) + r'(?=-|$)')
            variants = [c for c in pool if variant_re.match(c)]
        if variants:
            out.extend(sort_by_breakpoint(variants))
            _take(pool, variants)

        rule = rule_for_main(cls)
        if rule is None:
            continue
        for prefix in rule.related:
            related = [c for c in pool if matches_related(c, prefix)]
            if not related:
                continue
            out.extend(sort_by_breakpoint(related))
            consumed.update(related)
            _take(pool, related)

    out.extend(sort_by_breakpoint(pool))
    return out


def sort_classes(value: str) -> str:
    tokens = tokenize(value)
    return tokens.separator.join(sort_tokens(tokens.classes))
