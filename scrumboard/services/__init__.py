"""Service layer: ordering, board lifecycle, aggregate assembly and backups."""
