"""Core services shared by the API: settings, token handling, authentication and caching."""
