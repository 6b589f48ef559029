"""Infrastructure layer: SQLAlchemy persistence implementing application interfaces."""
