from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .config import load_options
from .report import RULES
from .scan import fix_source


logger = logging.getLogger(__name__)

DEFAULT_PATTERNS = ['**/*.html', '**/*.vue']
TAGS = {'sort': '[SORT]', 'multiline': '[MULTILINE]'}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description='Sort utility classes in class="..." attributes and wrap long lists across lines')
    p.add_argument('--root', required=True, help='File, or directory to search for templates')
    p.add_argument('--pattern', action='append', help=f'Glob under --root (repeatable, default: {", ".join(DEFAULT_PATTERNS)})')
    p.add_argument('--rule', action='append', choices=sorted(RULES), help='Rule to run (repeatable, default: all)')
    p.add_argument('--max-len', type=int, default=None, help='Maximum line length before wrapping (env TWCLASS_MAX_LEN, default 80)')
    p.add_argument('--quotes-on-new-line', action='store_true', default=None, help='Put the quotes of wrapped lists on their own lines (env TWCLASS_QUOTES_ON_NEW_LINE)')
    p.add_argument('--dry-run', action='store_true', help='Report only; exit 1 when something would change')
    p.add_argument('--backup', action='store_true', help='Write <file>.twclass.bak before modifying a file')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def find_files(root: Path, patterns: List[str]) -> List[Path]:
    if root.is_file():
        return [root]
    seen = set()
    files = []
    for pattern in patterns:
        for path in sorted(root.glob(pattern)):
            if path.is_file() and path not in seen:
                seen.add(path)
                files.append(path)
    return files


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    root = Path(args.root)
    if not root.exists():
        raise SystemExit(f'{root} not found')
    try:
        options = load_options(args.max_len, args.quotes_on_new_line)
    except ValueError as e:
        raise SystemExit(str(e))

    # sort first so wrapping lays out the final order
    rules = [r for r in ('sort', 'multiline') if not args.rule or r in args.rule]
    files = find_files(root, args.pattern or DEFAULT_PATTERNS)
    logger.debug('%d file(s) under %s, rules=%s, %s', len(files), root, rules, options)

    changed = 0
    findings = 0
    for path in files:
        src = path.read_text(encoding='utf-8', errors='ignore')
        out, fixes = fix_source(src, rules, options)
        for fix in fixes:
            print(f"{TAGS[fix.rule]} {path}:{fix.line}:{fix.column + 1} {fix.message}")
        findings += len(fixes)
        if out == src:
            continue
        changed += 1
        if args.dry_run:
            continue
        if args.backup:
            bak = path.with_suffix(path.suffix + '.twclass.bak')
            if not bak.exists():
                bak.write_text(src, encoding='utf-8')
        path.write_text(out, encoding='utf-8')

    verb = 'would change' if args.dry_run else 'changed'
    print(f"[TWCLASS] files={len(files)} {verb}={changed} findings={findings}")
    if args.dry_run and findings:
        return 1
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
