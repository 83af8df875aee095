"""
Cross-cutting helpers: settings, logging setup and the error types
every layer raises.
"""
