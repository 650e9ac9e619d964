"""Root-level conftest.py: make the checkout's packages importable.

Tests import shared helpers as ``tests.helpers`` and the application as
``osview``. Putting the repository root first on sys.path lets both resolve
to this checkout, even when another copy of osview is installed.
"""

import sys
from pathlib import Path

_repo_root = str(Path(__file__).parent)
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)
