"""
Feature modules for the DevConnector backend.

- auth: password hashing and signed tokens
- users: registration, login and user lookup
- profiles: the per-user profile aggregate and its routes
- github: public repository listing for profiles

A module exposes protocols in interfaces.py and raises its own exceptions
from exceptions.py. Modules depend on each other's interfaces only; the
concrete wiring lives in api/dependencies.py.
"""
