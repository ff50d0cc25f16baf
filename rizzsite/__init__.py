"""RizzSite - tone-aware reply suggestions for messages you received.

Combines NiceGUI for the single-page interface, Agno for the model backend,
FastAPI as the serving shell, and Pydantic for data validation.

Components:
    - agent: conversation adapter, backend protocols and configuration
    - ui: reply controller and the NiceGUI page
    - api: application factory and health endpoint
    - models: turns, response modes and request schemas
"""

__version__ = "0.1.0"
