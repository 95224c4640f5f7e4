# ABOUTME: Market data client package initialization
# ABOUTME: Exposes request parameter models and their validation contract

"""
Market data client package.

This package provides the request parameter objects used by a market-data
HTTP client, together with their validation rules and the serializer that
turns a validated request into the path and query of an outbound call.
Transport, authentication and response parsing are left to the HTTP layer.
"""

__version__ = "0.1.0"
