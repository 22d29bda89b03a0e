"""
HTTP API for the resume builder.

Routers live in `api.routes`; each router module delegates its database and
LLM work to the matching module in `api.routes.route_logic`.

Notes:
    1. Authenticated endpoints read a bearer token from the `Authorization` header.
    2. Every error response is rendered as `{"error": <message>}`.

"""
