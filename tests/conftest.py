"""Shared pytest configuration for the issues table formatter tests."""

import sys
from pathlib import Path

# Make the issues package importable from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent))
