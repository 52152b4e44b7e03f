"""
Centralized path helpers (flat layout: pokebattle/ sits at the project root).
"""
from __future__ import annotations
from pathlib import Path

# This file lives at pokebattle/core/paths.py
ROOT = Path(__file__).resolve().parents[2]
ASSETS = ROOT / "assets"
ROSTERS = ASSETS / "rosters"
SCHEMA = ROOT / "schema"
ROSTER_SCHEMA = SCHEMA / "roster.schema.json"
DEMO_ROSTERS = ROSTERS / "demo.json"
