"""
Domain layer package.

Entities, the image plan reconciliation service, port interfaces and
errors. No framework imports and no IO.
"""
