"""Snapshot reporters — Rich terminal, JSON, YAML."""
