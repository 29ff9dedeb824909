"""
Infrastructure layer.

Implementations of the application ports: SQLAlchemy repositories and
mappers, the SQLAlchemy unit of work, pydantic schemas and FastAPI routers.

This layer depends on domain and application layers,
but they do not depend on it.
"""
