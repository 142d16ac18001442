"""
Application layer for the admin bounded context.
"""
