"""
DOMAIN LAYER - Package search rules

This layer contains:
- Entities: SearchResultRow, one normalized registry hit
- Value Objects: ExtensionQuery, PreviewPayload
- Ports: PackageRegistry, implemented by infrastructure
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, botbuilder, httpx)
2. NO I/O operations
3. Only depends on Python stdlib
"""
