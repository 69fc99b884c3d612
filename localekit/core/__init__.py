"""Core services: events, configuration, logging, preferences, localization."""
