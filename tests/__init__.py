"""Test package for Nexus Inquire.

Structure:
    - unit/: Individual function and class tests
    - integration/: Chat panel, client and proxy wired together over ASGI

The upstream model is always stubbed. Leverages pytest with pytest-check for
soft assertions.
"""
