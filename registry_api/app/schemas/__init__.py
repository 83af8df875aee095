"""
Pydantic schema definitions for API payloads.

Each domain (users, people) defines its own models for request and
response bodies.  The same models are what the stores hold.
"""
