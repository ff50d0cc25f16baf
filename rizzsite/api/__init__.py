"""FastAPI shell that hosts the RizzSite page.

Endpoints:
    - GET /health: Service health status
    - GET /: Reply page (NiceGUI, mounted in rizzsite.main)
"""

from rizzsite.api.app import app, create_app

__all__ = ["app", "create_app"]
