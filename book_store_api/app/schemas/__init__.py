"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the stored ``Book`` records so that the
wire representation (for example the ``_id`` key) does not leak into
the storage layer.
"""
