"""Infrastructure: configuration, database access and logging."""
