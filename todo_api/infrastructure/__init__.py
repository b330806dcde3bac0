"""Infrastructure — database engine management and logging setup."""
