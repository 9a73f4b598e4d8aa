"""
Pytest configuration and shared fixtures.
"""

import pytest

AMAZING_GRACE = """[Verse 1]
G          G7        C         G
Amazing grace how sweet the sound
G              Em       D
That saved a wretch like me
"""


class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def song_content() -> str:
    """A short chart with chord lines over lyric lines, in G."""
    return AMAZING_GRACE


@pytest.fixture
def mcp() -> MockMCPServer:
    """Mock MCP server for tool registration."""
    return MockMCPServer("test")
