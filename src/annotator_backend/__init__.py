"""Annotator backend package wiring and entrypoints."""

from annotator_backend.settings import BackendSettings, get_settings

__all__ = ["BackendSettings", "get_settings"]
