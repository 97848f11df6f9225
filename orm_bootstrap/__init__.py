"""Database bootstrap for SQLModel-backed applications.

This package opens a database connection, declares the record schemas,
resets and seeds the storage, and exposes the schema handles to the HTTP
layer and the command-line interface.
"""

__version__ = "0.1.0"
