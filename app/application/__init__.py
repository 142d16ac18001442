"""
Application layer package.

Use cases orchestrate domain logic, transactions and remote storage.
Each use case is a single class with one ``execute`` coroutine and
depends on domain ports only.
"""
