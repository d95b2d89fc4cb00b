"""
Wiki.js MCP Server

MCP tools and resources over the Wiki.js GraphQL API.
"""

__version__ = "1.0.0"
