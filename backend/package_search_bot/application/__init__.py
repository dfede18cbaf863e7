"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- queries/   → Read operations (CQRS)
- common/    → Shared interfaces (Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
"""
