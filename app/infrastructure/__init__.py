"""
Infrastructure layer package.

Concrete adapters for the domain ports: SQLAlchemy repositories and
unit of work, the ImageKit asset storage, bcrypt and JWT.
"""
