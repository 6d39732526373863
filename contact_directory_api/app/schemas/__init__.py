"""
Pydantic schema definitions for API responses.

Every response is wrapped in an envelope carrying a ``success`` flag.
Schemas are separated from the SQL rows they are built from so the
wire representation stays stable if the store layout changes.
"""
