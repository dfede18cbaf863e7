"""Shared application-layer interfaces."""
