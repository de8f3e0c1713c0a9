"""Application layer: ports, the resolver chain, and document search."""
