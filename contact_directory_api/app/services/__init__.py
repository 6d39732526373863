"""
Service layer.

Each service encapsulates the SQL and reshaping logic for one area of
the directory (contacts, reference data).  Services receive the
``Database`` handle explicitly so API handlers stay free of SQL.
"""
