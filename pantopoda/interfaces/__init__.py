"""
Interfaces layer package.

FastAPI glue for writing JSON API responses and the composition
root that wires adapters into use cases. No business logic belongs here.
"""
