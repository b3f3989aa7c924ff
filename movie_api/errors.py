"""
Exception types for the Movie API.
Upstream failures (something broke) are kept apart from empty or not-found outcomes (nothing matched).
"""


class MovieApiError(Exception):
	"""Base class for every error raised by this package."""


class ConfigurationError(MovieApiError):
	"""Raised when required settings are missing or malformed."""


class UpstreamError(MovieApiError):
	"""Raised when the metadata provider could not be reached or answered garbage."""


class UpstreamTransportError(UpstreamError):
	"""Connection failure or non-2xx HTTP status from the provider."""


class UpstreamTimeoutError(UpstreamTransportError):
	"""The provider did not answer within the configured timeout."""


class UpstreamResponseError(UpstreamError):
	"""The provider answered, but the payload could not be parsed."""


class NoResultsError(MovieApiError):
	"""A pipeline completed without producing a single valid title."""

	def __init__(self, query: str):
		self.query = query
		super().__init__(f"No movies found for '{query}'")


class SeedNotFoundError(MovieApiError):
	"""The favorite title driving recommendations does not exist upstream."""

	def __init__(self, title: str, upstream_message: str = ''):
		self.title = title
		self.upstream_message = upstream_message
		super().__init__(f"movie not found: {title}")
