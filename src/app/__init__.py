"""Products API.

A FastAPI service exposing CRUD operations for products stored through SQLModel.
"""

__version__ = "0.1.0"
