"""Diff reporters — Rich terminal and JSON."""
