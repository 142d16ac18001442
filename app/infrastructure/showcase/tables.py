"""
SQLAlchemy Core table definitions for the showcase context.

Table and column names follow the production schema.
Foreign keys cascade from portfolio to its children; a category cannot
be dropped while links reference it (where the store enforces FKs).
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    func,
)

from app.infrastructure.database import metadata

categories = Table(
    "portfolio_main_categories",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("slug", String(120), nullable=False, unique=True),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
)

portfolios = Table(
    "portfolio",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("project_type", String(100), nullable=False),
    Column("publisher_name", String(255), nullable=False),
    Column("project_link", String(500)),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("updated_at", DateTime, nullable=False, server_default=func.now()),
)

portfolio_categories = Table(
    "portfolio_categories",
    metadata,
    Column(
        "portfolio_id",
        Integer,
        ForeignKey("portfolio.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("portfolio_main_categories.id", ondelete="RESTRICT"),
        primary_key=True,
    ),
)

portfolio_descriptions = Table(
    "portfolio_descriptions",
    metadata,
    Column("id", Integer, primary_key=True),
    Column(
        "portfolio_id",
        Integer,
        ForeignKey("portfolio.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("description", Text, nullable=False),
    Column("display_order", Integer, nullable=False),
)

portfolio_images = Table(
    "portfolio_images",
    metadata,
    Column("id", Integer, primary_key=True),
    Column(
        "portfolio_id",
        Integer,
        ForeignKey("portfolio.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("image_url", String(1000), nullable=False),
    Column("file_id", String(255)),
    Column("display_order", Integer, nullable=False, default=0),
    Column("alt_text", String(500)),
    Column("is_header", Boolean, nullable=False, default=False),
)
