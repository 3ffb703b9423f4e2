"""
Infrastructure layer package.

Concrete adapters for the ports defined in the domain layer:
the httpx-backed wire client, the pydantic rule engine and
the message catalog translator.
"""
