"""
Logging configuration module.

The library only emits records through module loggers; applications
that want them on a console call ``configure_logging``.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Top-level logger of the package
PACKAGE_LOGGER = "markdown_frontmatter"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def resolve_level(level: str | int) -> int:
	"""
	Translate a level name such as "debug" into its numeric value.

	Unknown names fall back to INFO.
	"""
	if isinstance(level, int):
		return level
	return logging._nameToLevel.get(level.upper(), logging.INFO)


def configure_logging(level: str | int | None = None) -> None:
	"""
	Configure basic logging with level and format.

	Parameters:
		level: Log level (e.g., "info", "debug", "warning"). Defaults to
			``LOG_LEVEL`` from the environment configuration.
	"""
	if level is None:
		from markdown_frontmatter.models.config import Config
		level = Config().log_level
	lvl = resolve_level(level)
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	logging.getLogger(PACKAGE_LOGGER).setLevel(lvl)


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "resolve_level",
    "LOG_FORMAT",
]
