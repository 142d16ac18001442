"""
Interfaces layer package.

FastAPI routers, Pydantic schemas and multipart decoding.
Routes call use cases and return responses; no business logic here.
"""
