"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and the bearer-token dependency. No business logic belongs here.
Routes call use cases and return responses.
"""
