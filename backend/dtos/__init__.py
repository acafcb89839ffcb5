"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models
and domain entities.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses
- internal/: DTOs for the service layer's inputs and outputs
"""
