"""Persistence: async engine, session dependencies, ORM models, repositories."""
