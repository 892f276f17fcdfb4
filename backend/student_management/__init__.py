"""Application package for the student management backend.

This package exposes the model, repository, service and controller
modules used by the FastAPI application. It is intentionally lightweight;
individual modules contain the concrete implementations and documentation.
"""
