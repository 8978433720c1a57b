"""Workflow nodes and AI-agent tools for a remote macOS Reminders HTTP API."""

__version__ = "0.3.0"
