"""
Pantopoda — helpers for outbound JSON HTTP calls and API response shaping.

Package root. The code is laid out in hexagonal layers (ports & adapters):

Layers:
    - domain: Status codes, request/response envelopes, validation model, ports (ABCs), errors.
    - application: Use cases that orchestrate domain ports (request validation).
    - infrastructure: Adapters (httpx wire client, pydantic rule engine, message catalog).
    - interfaces: FastAPI glue for rendering JSON API responses.
    - shared: Cross-cutting concerns (error mapping, logging).
"""
