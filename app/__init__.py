"""Movies Library - validated CRUD access to a movie collection."""
