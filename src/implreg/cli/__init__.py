"""Command-line interface for implreg."""
from __future__ import annotations
