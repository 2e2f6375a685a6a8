"""Integration tests for components working together as a system.

Coverage:
    - Completion endpoint with real HTTP requests over ASGI
    - Chat panel talking to the proxy app through the real client

Only the upstream model call is replaced by a stub service.
"""
