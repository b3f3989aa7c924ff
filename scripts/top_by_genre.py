"""
Print a genre ranking and, optionally, recommendations straight from the provider.

This script:
1) Loads settings from the environment / .env (OMDB_API_KEY is required)
2) Runs the genre ranking pipeline for the given genre
3) Runs the recommendation pipeline when --favorite is passed

Usage:
    python -m scripts.top_by_genre Comedy --favorite "The Matrix"

Handy for checking an API key and the provider's behavior without starting the server.
"""

import argparse  # command-line options
import time  # measure step timings

from loguru import logger  # console logging

from movie_api.config import Settings, configure_logging  # environment settings
from movie_api.engine import MovieEngine  # pipelines facade
from movie_api.errors import NoResultsError, SeedNotFoundError  # expected negative outcomes


def main():
	parser = argparse.ArgumentParser(description="Query the movie pipelines from the command line")
	parser.add_argument('genre', help="Genre to rank, e.g. 'Comedy' or 'sci-fi'")
	parser.add_argument('--favorite', help="Favorite movie to build recommendations from")
	parser.add_argument('--workers', type=int, default=None, help="Override OMDB_MAX_WORKERS")
	args = parser.parse_args()

	settings = Settings.from_env()
	if args.workers:
		settings.max_workers = args.workers
	configure_logging(settings.log_level)
	engine = MovieEngine.from_settings(settings)

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info(f"Top movies for genre '{args.genre}'")
	logger.info("=" * 60)

	t0 = time.time()  # start timer
	try:
		ranking = engine.top_by_genre(args.genre)
	except NoResultsError:
		logger.warning(f"No movies found for '{args.genre}'")
	else:
		for i, m in enumerate(ranking.titles, 1):
			logger.info(f"  {i:2d}. [{m.rating}] {m.title} ({m.year}) - {m.genres}")
		logger.info(f"[OK] {ranking.total} movies in {time.time() - t0:.2f}s")

	if not args.favorite:
		return

	logger.info("=" * 60)
	logger.info(f"Recommendations for '{args.favorite}'")
	logger.info("=" * 60)

	t0 = time.time()
	try:
		recs = engine.recommend(args.favorite)
	except SeedNotFoundError:
		logger.warning(f"Favorite movie '{args.favorite}' not found")
		return

	logger.info(f"Seed: {recs.seed.title} ({recs.seed.year}) [{recs.seed.rating}]")
	for tier in recs.tiers:
		logger.info(f"Level {tier.level}: {tier.label}")
		for m in tier.members:
			logger.info(f"    [{m.rating}] {m.title} ({m.year})")
	logger.info(f"[OK] {len(recs.tiers)} tiers in {time.time() - t0:.2f}s")


if __name__ == '__main__':
	main()  # run from the command line
