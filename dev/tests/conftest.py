"""
aiffreader test configuration.

Puts src/ and the repository root on sys.path so the tests run from a plain
checkout as well as from an installed package.
"""

import sys
from pathlib import Path

# Path setup
TESTS_DIR = Path(__file__).parent
DEV_DIR = TESTS_DIR.parent
ROOT_DIR = DEV_DIR.parent
SRC_DIR = ROOT_DIR / "src"

sys.path.insert(0, str(ROOT_DIR))
sys.path.insert(0, str(SRC_DIR))
sys.path.insert(0, str(TESTS_DIR))
