"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every resource uses (DB wiring,
settings, the error taxonomy, request validators, the vote tweak). Keep
resource-specific SQL in the corresponding package (e.g. `reviews/`).
"""
