from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from dotenv import load_dotenv


DEFAULT_MAX_LEN = 80

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


@dataclass(frozen=True)
class Options:
    max_len: int = DEFAULT_MAX_LEN
    quotes_on_new_line: bool = False

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'Options':
        """Build options from a rule-options mapping.

        Accepts the camelCase keys used by the lint rule (``maxLen``,
        ``quotesOnNewLine``) as well as the snake_case field names.
        """
        data = data or {}
        max_len = data.get('maxLen', data.get('max_len', DEFAULT_MAX_LEN))
        quotes = data.get('quotesOnNewLine', data.get('quotes_on_new_line', False))
        if isinstance(quotes, str):
            quotes = _parse_bool(quotes, 'quotesOnNewLine')
        return cls(max_len=_check_max_len(max_len, 'maxLen'), quotes_on_new_line=bool(quotes))


def _check_max_len(value: Any, name: str) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValueError(f'{name} must be an integer, got {value!r}')
    if n <= 0:
        raise ValueError(f'{name} must be positive, got {n}')
    return n


def _parse_bool(value: str, name: str) -> bool:
    v = value.strip().lower()
    if v in TRUE_VALUES:
        return True
    if v in FALSE_VALUES:
        return False
    raise ValueError(f'{name} must be a boolean, got {value!r}')


def load_options(max_len: Optional[int] = None, quotes_on_new_line: Optional[bool] = None) -> Options:
    """Options from .env / environment, with explicit arguments taking precedence."""
    load_dotenv()
    opts = Options()

    env_max_len = os.getenv('TWCLASS_MAX_LEN')
    if env_max_len:
        opts = replace(opts, max_len=_check_max_len(env_max_len, 'TWCLASS_MAX_LEN'))
    env_quotes = os.getenv('TWCLASS_QUOTES_ON_NEW_LINE')
    if env_quotes is not None:
        opts = replace(opts, quotes_on_new_line=_parse_bool(env_quotes, 'TWCLASS_QUOTES_ON_NEW_LINE'))

    if max_len is not None:
        opts = replace(opts, max_len=_check_max_len(max_len, '--max-len'))
    if quotes_on_new_line is not None:
        opts = replace(opts, quotes_on_new_line=quotes_on_new_line)
    return opts
