"""Dishka IoC container."""
