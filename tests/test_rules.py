import pytest

from twclass.rules import (
    BREAKPOINTS,
    GROUPS,
    bare_class,
    breakpoint_rank,
    dash_prefix,
    has_modifier,
    is_main_of,
    matches_related,
    rule_for_main,
)


def test_main_prefixes_are_disjoint():
    mains = [m for rule in GROUPS for m in rule.main]
    assert len(mains) == len(set(mains))


def test_breakpoints_ascend():
    assert BREAKPOINTS == ('sm', 'md', 'lg', 'xl', '2xl')


@pytest.mark.parametrize('cls, rank', [
    ('p-2', 0),
    ('hover:p-2', 0),
    ('dark:after:p-2', 0),
    ('sm:p-2', 1),
    ('md:p-2', 2),
    ('lg:hover:p-2', 3),
    ('dark:xl:p-2', 4),
    ('2xl:p-2', 5),
    ('-md:mt-2', 2),
    ('peer-checked:md:p-2', 0),
])
def test_breakpoint_rank(cls, rank):
    assert breakpoint_rank(cls) == rank


@pytest.mark.parametrize('cls, expected', [
    ('md:grid', True),
    ('!hover:underline', True),
    ('2xl:p-8', True),
    ('grid', False),
    ('-mt-2', False),
    ('peer-checked:after:border-white', False),
    ('[mask-type:luminance]', False),
])
def test_has_modifier(cls, expected):
    assert has_modifier(cls) is expected


def test_bare_class_strips_markers_and_modifiers():
    assert bare_class('md:hover:-mt-2') == 'mt-2'
    assert bare_class('!top-0') == 'top-0'
    assert bare_class('peer-checked:after:top-0') == 'peer-checked:after:top-0'


def test_dash_prefix_ignores_markers():
    assert dash_prefix('-mt-2') == 'mt'
    assert dash_prefix('!grid') == 'grid'
    assert dash_prefix('peer') == 'peer'


def test_related_is_matched_segment_wise():
    assert matches_related('to-blue-500', 'to')
    assert matches_related('md:to-90%', 'to')
    assert not matches_related('top-0', 'to')
    assert matches_related('grid-cols-2', 'grid-cols')
    assert matches_related('grow', 'grow')


def test_rule_for_main():
    assert rule_for_main('bg-gradient-to-r') is GROUPS[0]
    assert rule_for_main('!absolute') is GROUPS[1]
    assert rule_for_main('flex-col') is GROUPS[2]
    assert rule_for_main('inline-grid') is GROUPS[3]
    assert rule_for_main('bg-red-500') is None
    assert not is_main_of('md:flex', GROUPS[2])
