"""Infrastructure: SQLAlchemy persistence adapter for integer-keyed entities."""
