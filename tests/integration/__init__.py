"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests
    - Reply cycle from controller through ChatAI to a backend session

The backend session is an in-memory fake; everything above it is real.
"""
