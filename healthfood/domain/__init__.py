"""Parsing and prompt domain."""
