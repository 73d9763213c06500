"""Products API: CRUD endpoints for products backed by SQLModel."""
