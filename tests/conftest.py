"""Pytest configuration for the javaconv test suite."""

import sys
from pathlib import Path

# Add the repository root to the path for javaconv imports
sys.path.insert(0, str(Path(__file__).parent.parent))
