from granular_search.db.schema import DatabaseSchema, MetadataSchema, SchemaInspector

__all__ = [
    "DatabaseSchema",
    "MetadataSchema",
    "SchemaInspector",
]
