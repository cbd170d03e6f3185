"""Async client for the Aura backend: session, request executor, endpoints and screen services."""

__version__ = "0.1.0"
