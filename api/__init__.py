"""Sync proxy service."""
