"""
Service layer.

Services hold the business logic for a domain and depend on
repository interfaces rather than on a concrete database.
"""
