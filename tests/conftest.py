"""
Pytest configuration: puts the project root on sys.path so `geoshapes`
imports without installation.

Usage:
    pytest tests/ -v
"""

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
