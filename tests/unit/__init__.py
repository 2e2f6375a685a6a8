"""Unit tests for individual components in isolation.

Coverage:
    - proxy/: Configuration, prompt construction and the Agno call
    - ui/: Chat panel state and the proxy HTTP client

Uses mocks for Agno and httpx mock transports instead of the network.
"""
