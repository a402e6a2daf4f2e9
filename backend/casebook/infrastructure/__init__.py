"""Infrastructure adapters (stores, decoding, identity, dispatch, DI)."""
