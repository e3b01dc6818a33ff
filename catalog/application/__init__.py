"""Application layer: DTOs, ports and the cached services."""
