"""Domain layer: enums and caller-visible exceptions (no infrastructure imports)."""
