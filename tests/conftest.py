"""Shared pytest setup: headless matplotlib for renderer and CLI tests."""

from __future__ import annotations

import os

os.environ.setdefault("MPLBACKEND", "Agg")
