"""Language Server Protocol surface (pygls)."""
