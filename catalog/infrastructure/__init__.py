"""Infrastructure: Redis cache adapter, key/value codecs and SQLAlchemy persistence."""
