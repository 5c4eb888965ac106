"""Common utilities shared across the package.

Includes:
- ``config``: Pydantic-based fusion configuration from environment variables.
- ``logging``: structured logging setup with structlog.
- ``metrics``: Prometheus metrics for fusion and engine queries.

Import pattern:
- from vecfusion.common.config import FusionConfig
- from vecfusion.common.logging import configure_logging
"""
