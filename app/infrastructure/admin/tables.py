"""
SQLAlchemy Core table definition for admin accounts.
"""

from sqlalchemy import Column, DateTime, Integer, String, Table, func

from app.infrastructure.database import metadata

admins = Table(
    "admin",
    metadata,
    Column("admin_id", Integer, primary_key=True),
    Column("admin_firstname", String(100), nullable=False),
    Column("admin_lastname", String(100), nullable=False),
    Column("admin_email", String(255), nullable=False, unique=True),
    Column("admin_password", String(255), nullable=False),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)
