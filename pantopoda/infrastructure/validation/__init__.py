"""Validation adapters: pydantic rule engine and message catalog translator."""
