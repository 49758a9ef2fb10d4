"""
Root conftest - shared pytest configuration and fixtures.
Ensures the swachhta_prahari package is importable when running pytest from the repo root.
"""
import sys
from pathlib import Path

_root = Path(__file__).resolve().parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))
