"""Configuration package for the catch query engine.

Provides a layered configuration system with support for:
- Multiple configuration sources (defaults, files, environment, CLI)
- Hierarchical configuration with proper precedence
- Frozen configuration objects with validation
- Simplified access through a facade

Main components:
- config.py: Configuration dataclasses and loader
- service.py: Facade for simplified configuration access
- species.json: Species catalog and aliases
"""
