"""
HTTP transport layer: routers that decode requests, call services and
map service errors to status codes.
"""
