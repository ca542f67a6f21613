"""
Schemas module - Request/Response schemas for API endpoints.

Difference from tables:
- Tables (hirehub.db.tables): what is stored
- Schemas: API contract (what client sends/receives)
"""
