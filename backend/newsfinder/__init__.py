"""News Finder: search a news endpoint from a browser form."""
