"""
I/O models for API requests and responses.

These models define the contract between the API and clients; field names
follow the JSON the frontend expects (``doorHeight``, ``perPage`` and so on).
"""
