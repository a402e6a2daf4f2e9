"""casebook: uniform CRUD lifecycle for identity-stamped resources."""

__version__ = "0.1.0"
