"""
Bot Adapters Module
===================

This module provides adapters for integrating external chat platforms with
the package search use case.

DESIGN PRINCIPLE:
-----------------
The adapters are "translation layers". They:
1. Receive events from the external platform (Teams)
2. Translate platform-specific data to domain types (ExtensionQuery, PreviewPayload)
3. Call the application layer (SearchPackagesHandler)
4. Format results back to the platform-specific format (cards)

Available Adapters:
- teams: Microsoft Teams bot adapter (see adapters/teams/)
"""
