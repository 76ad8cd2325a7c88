"""Pending transaction models, classification and services."""
