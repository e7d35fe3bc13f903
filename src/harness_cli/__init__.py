"""Command-line client for the Harness NextGen management API."""

from __future__ import annotations

__version__ = "0.1.0"
