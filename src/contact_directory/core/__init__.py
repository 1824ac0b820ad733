"""Core errors and services."""
