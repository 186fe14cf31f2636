"""Operational scripts for the API service."""
