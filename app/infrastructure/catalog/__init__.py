"""
Infrastructure adapters for the catalog bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems such as the relational store.
"""
