"""Role-based contact management REST API with duplicate merging."""

__version__ = "0.1.0"
