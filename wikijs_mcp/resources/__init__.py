"""
Resources Module - MCP Resource Implementations
"""

from wikijs_mcp.resources import pages

__all__ = ["pages"]
