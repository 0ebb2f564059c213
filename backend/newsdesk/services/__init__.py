"""Services Layer — the imperative shell around the pure core.

Invariants:
    - One service class per entity; each takes an EntityStore, never a raw session
    - Every write follows load snapshot → run guard → mutate → commit
    - Services return schema models, never ORM rows

Design Decisions:
    - SqlAlchemyEntityStore (entity_store.py) is the only module here that builds SQL
"""
