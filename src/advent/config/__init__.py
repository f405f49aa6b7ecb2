"""Configuration for the advent runner and CLI."""

from __future__ import annotations
