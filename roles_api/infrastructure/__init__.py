"""Infrastructure: SQLAlchemy persistence (engine, models, repositories, error translation)."""
