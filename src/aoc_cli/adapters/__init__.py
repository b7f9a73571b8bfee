"""Concrete adapters for the ports package."""
