"""Canonical ordering and line wrapping for utility-class lists."""
from .config import Options, load_options
from .multiline import Layout, LayoutContext, wrap_classes
from .report import Attribute, Fix, check_multiline, check_sort
from .scan import find_class_attributes, fix_source
from .sorter import sort_classes, sort_tokens
from .tokenizer import tokenize

__all__ = [
    'Attribute',
    'Fix',
    'Layout',
    'LayoutContext',
    'Options',
    'check_multiline',
    'check_sort',
    'find_class_attributes',
    'fix_source',
    'load_options',
    'sort_classes',
    'sort_tokens',
    'tokenize',
    'wrap_classes',
]

__version__ = '0.1.0'
