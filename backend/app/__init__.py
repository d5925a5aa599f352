"""
ArticleDesk Backend — Application Package Initializer
======================================================

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (Page Handler Logic)    │  ← list / new / edit / save / read
    ├─────────────────────────────────────┤
    │   Models & Schemas (Data Shapes)    │  ← Article entity + Pydantic DTOs
    ├─────────────────────────────────────┤
    │         Store (Persistence)         │  ← ArticleStore interface, in-memory impl
    └─────────────────────────────────────┘

    Routes receive the store through FastAPI dependency injection and pass it
    to the services, so each layer can be tested on its own.
"""

__version__ = "1.0.0"
