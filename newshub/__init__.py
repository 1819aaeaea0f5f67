"""NewsHub - article publishing backend."""
