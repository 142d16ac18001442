"""
Showcase bounded context: domain layer.

This module contains all domain logic for the public showcase:
- Categories and their slugs
- Portfolio aggregates (fields, categories, descriptions, images)
- Image plan reconciliation between stored and desired image sets
"""
