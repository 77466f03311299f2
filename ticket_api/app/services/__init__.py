"""
Service layer abstraction.

Each service encapsulates business logic for a domain so that the API
handlers only deal with HTTP concerns.
"""
