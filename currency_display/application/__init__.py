"""Application layer: ports and the currency facade."""
