"""
Pydantic schema definitions for API payloads.

Inbound and outbound user models are kept separate so that derived
ticket fields can never be supplied by a client.
"""
