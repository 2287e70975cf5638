"""
Catalog bounded context: domain layer.

Contains entities, port interfaces, and domain errors
for the products catalog.
"""
