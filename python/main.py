#!/usr/bin/env python3
"""Sliding-block state-space explorer.

Usage::

    python main.py ../fixtures/klotski.json > edges.csv
    python main.py ../fixtures/klotski.json -m reachable
    python main.py ../fixtures/klotski.json -p 10000 -l debug

Installed with ``pip install -e .`` the same command is available as
``slidegraph``.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidegraph.cli import app  # noqa: E402

if __name__ == "__main__":
    app()
