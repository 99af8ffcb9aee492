"""Role resource service: paginated CRUD over roles with a permission-name projection."""

__version__ = "1.0.0"
