"""Persistence: async engine, declarative Base, models mixins, repositories."""
