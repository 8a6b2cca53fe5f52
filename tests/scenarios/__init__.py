"""Conformance test scenarios for the ETag middleware.

This package contains end-to-end scenario tests that run the middleware
inside a FastAPI application. Each scenario covers one aspect of
conditional request handling.
"""
