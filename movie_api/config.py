"""
Configuration module.
Reads runtime settings from the environment (and a local .env file when present).
"""

import os  # environment access
import sys  # stderr sink for logging
from dataclasses import dataclass  # plain settings container
from typing import Optional  # optional overrides

from dotenv import load_dotenv  # .env support for local development
from loguru import logger  # console logging

from .errors import ConfigurationError


DEFAULT_BASE_URL = 'http://www.omdbapi.com/'
PLACEHOLDER_API_KEY = 'your_api_key_here'


@dataclass
class Settings:
	"""Runtime settings for the OMDb client, pipelines, and HTTP server."""
	omdb_api_key: str
	omdb_base_url: str = DEFAULT_BASE_URL
	request_timeout: float = 10.0  # seconds per outbound call
	max_workers: int = 4  # concurrent search terms / attribute values
	max_hits_per_search: int = 10  # one provider page
	port: int = 8080
	log_level: str = 'INFO'

	@classmethod
	def from_env(cls, env_file: Optional[str] = None) -> 'Settings':
		"""
		Build settings from environment variables.
		Values already present in the environment win over the .env file.
		"""
		if load_dotenv(env_file):
			logger.debug("[Config] Loaded variables from .env")
		else:
			logger.debug("[Config] No .env file found, using process environment only")

		api_key = os.getenv('OMDB_API_KEY', '').strip()
		if not api_key or api_key == PLACEHOLDER_API_KEY:
			raise ConfigurationError(
				"OMDB_API_KEY environment variable is required. Please set it in your .env file"
			)

		return cls(
			omdb_api_key=api_key,
			omdb_base_url=os.getenv('OMDB_BASE_URL') or DEFAULT_BASE_URL,
			request_timeout=_read_number('OMDB_TIMEOUT_SECONDS', 10.0, float),
			max_workers=_read_number('OMDB_MAX_WORKERS', 4, int),
			max_hits_per_search=_read_number('OMDB_MAX_HITS_PER_SEARCH', 10, int),
			port=_read_number('PORT', 8080, int),
			log_level=(os.getenv('LOG_LEVEL') or 'INFO').upper(),
		)


def _read_number(name: str, default, cast):
	raw = os.getenv(name)
	if raw is None or not raw.strip():
		return default
	try:
		value = cast(raw.strip())
	except ValueError as e:
		raise ConfigurationError(f"{name} must be a number, got '{raw}'") from e
	if value <= 0:
		raise ConfigurationError(f"{name} must be positive, got {value}")
	return value


def configure_logging(level: str = 'INFO'):
	"""Replace loguru's default sink with a single stderr sink at the given level."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())
	logger.debug(f"[Config] Logging configured at level {level.upper()}")
