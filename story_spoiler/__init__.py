"""Story Spoiler REST API test suite."""

__version__ = "1.0.0"
