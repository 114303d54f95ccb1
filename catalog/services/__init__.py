"""Services Layer — author resolution, link maintenance, queries, and transactions.

Invariants:
    - Resolver, RelationshipStore, QueryEngine, and repositories never commit
    - PaperService and AuthorService own the transaction boundary (one commit per write)

Design Decisions:
    - One class per concern, composed per request over a shared AsyncSession
"""
