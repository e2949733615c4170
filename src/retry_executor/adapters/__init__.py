"""Adapters – integrations of the retry executors with third-party clients."""
