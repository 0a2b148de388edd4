"""
HTTP API for the catalog service.
"""
