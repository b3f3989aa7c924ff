"""
FastAPI server exposing the movie API.
Endpoints:
- GET /health: basic health check
- GET /api/movie?title=...: movie details
- GET /api/episode?series_title=...&season=1&episode_number=1: episode details
- GET /api/movies/genre?genre=Action: top 15 movies of a genre by IMDb rating
- GET /api/recommendations?favorite_movie=...: tiered recommendations

Startup builds the engine from environment settings (OMDB_API_KEY, OMDB_BASE_URL, ...).

Run: uvicorn api:app --reload
"""

# Import standard libraries for timing
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI  # FastAPI primitives
from fastapi.middleware.cors import CORSMiddleware  # open CORS like the original service
from fastapi.responses import JSONResponse  # explicit error payloads
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for settings, engine, and errors
from movie_api.config import Settings, configure_logging  # environment settings
from movie_api.engine import MovieEngine  # pipelines facade
from movie_api.errors import NoResultsError, SeedNotFoundError, UpstreamError  # error kinds
from movie_api.models import NotFound, RatingSource, TitleSummary  # domain types

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie API", version="1.0.0")  # web app

# Allow any origin, as the original service did
app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
	allow_headers=["Content-Type", "Authorization"],
)

# Globals that hold the engine instance and measured startup time
ENGINE: Optional[MovieEngine] = None  # will point to the initialized engine
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model for one third-party rating
class RatingOut(BaseModel):
	source: str  # e.g., "Rotten Tomatoes"
	value: str  # e.g., "87%"


# Pydantic model for the movie details payload
class MovieDetailsOut(BaseModel):
	title: str
	year: str
	plot: str
	country: str
	awards: str
	director: str
	ratings: List[RatingOut]


# Pydantic model for the episode details payload
class EpisodeDetailsOut(BaseModel):
	title: str
	series_title: str  # as requested by the caller
	season: str
	episode: str
	year: str
	plot: str
	director: str
	actors: str
	imdb_rating: str
	ratings: List[RatingOut]


# Pydantic model that describes the shape of a single movie in list responses
class MovieBrief(BaseModel):
	title: str  # human-readable title
	year: str  # release year text
	imdb_rating: str  # rating as text
	genre: str  # comma-separated genres
	director: str  # comma-separated directors
	plot: str  # short synopsis


# Pydantic model for the genre ranking payload
class GenreMoviesResponse(BaseModel):
	genre: str  # genre actually searched (after normalization)
	movies: List[MovieBrief]  # ranked, best first
	total: int  # number of movies returned


# Pydantic model for one recommendation tier
class MovieLevel(BaseModel):
	level: int  # 1 genre, 2 director, 3 actors
	description: str  # tier label
	movies: List[MovieBrief]  # ranked tier members


# Pydantic model for the recommendations payload
class RecommendationResponse(BaseModel):
	favorite_movie: MovieBrief  # resolved seed title
	recommendations: List[MovieLevel]  # non-empty tiers only


# Pydantic model for every error response
class ErrorResponse(BaseModel):
	error: str  # HTTP reason phrase
	message: str  # human-readable explanation
	code: int  # HTTP status code


def error_response(code: int, error: str, message: str) -> JSONResponse:
	"""Build a JSON error response in the API's error shape."""
	body = ErrorResponse(error=error, message=message, code=code)
	return JSONResponse(status_code=code, content=body.model_dump())


def bad_request(message: str) -> JSONResponse:
	return error_response(400, "Bad Request", message)


def not_found(message: str) -> JSONResponse:
	return error_response(404, "Not Found", message)


def internal_error(message: str) -> JSONResponse:
	return error_response(500, "Internal Server Error", message)


def to_ratings(ratings: List[RatingSource]) -> List[RatingOut]:
	return [RatingOut(source=r.source, value=r.value) for r in ratings]


def to_brief(summary: TitleSummary) -> MovieBrief:
	return MovieBrief(
		title=summary.title,
		year=summary.year,
		imdb_rating=summary.rating,
		genre=summary.genres,
		director=summary.director,
		plot=summary.synopsis,
	)


def get_engine() -> MovieEngine:
	"""Return the running engine, building it lazily if startup did not."""
	global ENGINE
	if ENGINE is None:
		settings = Settings.from_env()
		ENGINE = MovieEngine.from_settings(settings)
	return ENGINE


# FastAPI startup hook to initialize the engine once
@app.on_event("startup")
async def startup_event():
	"""Load settings, configure logging, and build the engine unless one is installed already."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	if ENGINE is None:
		settings = Settings.from_env()  # raises ConfigurationError without an API key
		configure_logging(settings.log_level)  # level from LOG_LEVEL
		logger.info("[API] Startup: building engine from environment settings...")  # log intent
		ENGINE = MovieEngine.from_settings(settings)  # create engine
	else:
		logger.info("[API] Startup: using pre-installed engine")

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "healthy",  # constant indicator
		"message": "Movie API is running",  # human-readable status
		"engine_ready": ENGINE is not None,  # True if engine initialized
	}


@app.get("/api/movie", response_model=MovieDetailsOut, responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
def movie_details(title: Optional[str] = None):
	"""Details for a single movie looked up by title."""
	if not title or not title.strip():
		return bad_request("Title parameter is required")

	try:
		result = get_engine().movie_details(title.strip())
	except UpstreamError as e:
		logger.error(f"[API] /api/movie '{title}' failed: {e}")
		return internal_error("Failed to fetch movie details")

	if isinstance(result, NotFound):
		return not_found(result.message)

	record = result.value
	return MovieDetailsOut(
		title=record.title,
		year=record.year,
		plot=record.plot,
		country=record.country,
		awards=record.awards,
		director=record.director,
		ratings=to_ratings(record.ratings),
	)


@app.get("/api/episode", response_model=EpisodeDetailsOut, responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
def episode_details(
	series_title: Optional[str] = None,
	season: Optional[str] = None,
	episode_number: Optional[str] = None,
):
	"""Details for one episode of a series."""
	if not series_title or not season or not episode_number:
		return bad_request("series_title, season, and episode_number parameters are required")

	try:
		season_no = int(season)
	except ValueError:
		return bad_request("Season must be a valid number")
	try:
		episode_no = int(episode_number)
	except ValueError:
		return bad_request("Episode number must be a valid number")

	try:
		result = get_engine().episode_details(series_title, season_no, episode_no)
	except UpstreamError as e:
		logger.error(f"[API] /api/episode '{series_title}' S{season_no}E{episode_no} failed: {e}")
		return internal_error("Failed to fetch episode details")

	if isinstance(result, NotFound):
		return not_found(result.message)

	record = result.value
	return EpisodeDetailsOut(
		title=record.title,
		series_title=series_title,
		season=record.season,
		episode=record.episode,
		year=record.year,
		plot=record.plot,
		director=record.director,
		actors=record.actors,
		imdb_rating=record.imdb_rating,
		ratings=to_ratings(record.ratings),
	)


@app.get("/api/movies/genre", response_model=GenreMoviesResponse, responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
def movies_by_genre(genre: Optional[str] = None):
	"""Top 15 movies of a genre, ranked by IMDb rating."""
	if not genre or not genre.strip():
		return bad_request("Genre parameter is required")

	start = time.time()  # start timer
	try:
		ranking = get_engine().top_by_genre(genre)
	except NoResultsError:
		return not_found("No movies found for the specified genre")
	except UpstreamError as e:
		logger.error(f"[API] /api/movies/genre '{genre}' failed: {e}")
		return internal_error("Failed to fetch movies by genre")

	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /api/movies/genre served {ranking.total} movies in {elapsed_ms:.2f} ms")  # summary
	return GenreMoviesResponse(
		genre=ranking.genre,
		movies=[to_brief(t) for t in ranking.titles],
		total=ranking.total,
	)


@app.get("/api/recommendations", response_model=RecommendationResponse, responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})
def recommendations(favorite_movie: Optional[str] = None):
	"""Recommendations in up to three tiers: same genre, same director, same lead actors."""
	if not favorite_movie or not favorite_movie.strip():
		return bad_request("favorite_movie parameter is required")

	start = time.time()  # start timer
	try:
		recs = get_engine().recommend(favorite_movie)
	except SeedNotFoundError:
		return not_found("Favorite movie not found")
	except UpstreamError as e:
		logger.error(f"[API] /api/recommendations '{favorite_movie}' failed: {e}")
		return internal_error("Failed to generate recommendations")

	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /api/recommendations served {len(recs.tiers)} tiers in {elapsed_ms:.2f} ms")  # summary
	return RecommendationResponse(
		favorite_movie=to_brief(recs.seed),
		recommendations=[
			MovieLevel(level=t.level, description=t.label, movies=[to_brief(m) for m in t.members])
			for t in recs.tiers
		],
	)
