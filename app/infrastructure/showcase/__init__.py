"""
Infrastructure adapters for the showcase bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system: the relational store or the asset CDN.
"""
