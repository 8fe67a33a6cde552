"""
HTTP layer: routers, middleware and error translation.
"""
