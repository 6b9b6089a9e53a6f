#!/usr/bin/env python3
"""
Postboard - minimal content-sharing store
Main entry point following Clean Architecture principles

Architecture Layers:
- Domain: Posts, the post store and its tag/like indices
- Application: Use cases and orchestration
- Infrastructure: In-memory and SQLite storage, configuration
- Presentation: User interface (CLI)
"""

from src.presentation.cli import cli

if __name__ == "__main__":
    cli()
