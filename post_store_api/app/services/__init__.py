"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The post
store keeps its data in process memory; swapping it for a database
would not require changes to the API handlers.
"""
