"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks every feature uses (DB wiring, logging,
paging, error translation). Keep feature-specific SQL and business logic in
the corresponding feature package (e.g. `orders/`).
"""
