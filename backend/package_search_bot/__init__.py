"""
Package Search Bot

A Microsoft Teams bot that echoes messages, greets new members and offers a
messaging extension searching the NuGet package registry.
"""

__version__ = "1.0.0"
