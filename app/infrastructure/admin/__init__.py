"""
Infrastructure adapters for the admin bounded context.
"""
