"""Protectron scoring service: EU AI Act risk, progress and certification scoring."""
