"""
Product catalog API endpoints.
"""
