"""Schema loading and flattening for dh-create.

Quick usage::

    from dh_create.schema import flatten_schema, load_schema

    view = flatten_schema(load_schema("schema.yaml"))
    view.to_dict()["classes"]["Sample"]["attributes"]
"""

from dh_create.schema.loader import ViewFactory, flatten_schema, load_schema
from dh_create.schema.view import LinkMLSchemaView, SchemaView

__all__ = [
    "LinkMLSchemaView",
    "SchemaView",
    "ViewFactory",
    "flatten_schema",
    "load_schema",
]
