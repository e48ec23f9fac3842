"""
blocksort REST API Server

HTTP endpoints for the block-sort front end.
"""

from blocksort.server.api import app, start_server

__all__ = ["app", "start_server"]
