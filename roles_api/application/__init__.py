"""Application layer: DTOs and services (no dependency on ORM or HTTP)."""
