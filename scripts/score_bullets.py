from __future__ import annotations

import argparse
import json
import re
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvscore.services.arbiter_service import score_arbiter  # noqa: E402

_BULLET_RE = re.compile(
    r"^\s*(?:[-*]|[\u2022\u00b7\u25aa\u25ab\u25cf\u25e6\u2043\u2023\u2219\uf0b7]|(?:\d+[\.\)]))\s+"
)


def read_bullets(path: Path) -> list[str]:
    bullets: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        text = _BULLET_RE.sub("", line).strip()
        if text:
            bullets.append(text)
    return bullets


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score original vs tailored CV bullets and print the arbiter result as JSON."
    )
    parser.add_argument("original", help="File with one original bullet per line")
    parser.add_argument("tailored", help="File with one tailored bullet per line")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact output)")
    parser.add_argument("--workers", type=int, default=None, help="Thread pool size for scoring")
    args = parser.parse_args(argv)

    result = score_arbiter(
        read_bullets(Path(args.original)),
        read_bullets(Path(args.tailored)),
        max_workers=args.workers,
    )
    print(json.dumps(result.model_dump(), indent=args.indent or None, ensure_ascii=False))
    return 0 if result.methodology_preserved else 2


if __name__ == "__main__":
    sys.exit(main())
