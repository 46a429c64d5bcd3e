"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Message catalog and locale negotiation
- Problem-detail error mapping and handlers
- Rate limiting
- Logging configuration
"""
