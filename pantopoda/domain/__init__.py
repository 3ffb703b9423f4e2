"""
Domain layer package.

Contains the envelope and validation model: value objects, port
interfaces and errors. No framework imports and no IO.
"""
