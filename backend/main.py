from dotenv import load_dotenv
import os
import logging
from datetime import datetime, timezone

load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from models.weather import RecentSearches, WeatherResponse
from services.weather import (
    AVIATIONWEATHER_BASE,
    InvalidStationError,
    StationNotFoundError,
    UpstreamFetchError,
    fetch_metar,
    fetch_taf,
    normalize_station,
)
from services.flight_category import classify
from services.translator import translate_forecast, translate_report
from services.recent import recent_searches

logger.info("🔧 Environment Check:")
logger.info(f"   AVIATIONWEATHER_BASE: {AVIATIONWEATHER_BASE}")
logger.info(f"   ENVIRONMENT: {os.getenv('ENVIRONMENT', 'development')}")

SERVICE_NAME = "METAR/TAF Briefing"
VERSION = "1.0.0"

# Get allowed origins/hosts from environment
allowed_origins = os.getenv("ALLOWED_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
allowed_hosts = os.getenv("ALLOWED_HOSTS", "*").split(",")

app = FastAPI(
    title=SERVICE_NAME,
    description="Flight category and plain-English translation of METAR and TAF reports",
    version=VERSION,
    docs_url="/docs" if os.getenv("ENVIRONMENT") != "production" else None,
    redoc_url="/redoc" if os.getenv("ENVIRONMENT") != "production" else None
)

# Security middleware
app.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "DELETE", "HEAD", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    """Render errors as {"error": ...} for the frontend."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.get("/")
@app.head("/")
def health():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "version": VERSION,
    }


@app.get("/health")
@app.get("/api/health")
def detailed_health():
    return {"status": "ok"}


@app.get("/api/weather", response_model=WeatherResponse)
def weather(station: str | None = None):
    """Current METAR and TAF for a station, classified and translated."""
    try:
        code = normalize_station(station)
    except InvalidStationError as e:
        logger.info(f"🚫 Rejected station {station!r}")
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"🛫 Weather request for {code}")

    try:
        metar = fetch_metar(code)
        taf = fetch_taf(code)
    except StationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UpstreamFetchError as e:
        logger.error(f"💥 Weather fetch error for {code}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch weather data from AviationWeather.gov.")

    result = classify(metar)
    logger.info(f"✅ {code}: {result.category.value}")
    recent_searches.add(code)

    return WeatherResponse(
        station=code,
        metar=metar,
        taf=taf,
        category=result.category,
        visibility_sm=result.visibility_sm,
        ceiling_ft=result.ceiling_ft,
        translated_metar=translate_report(metar),
        translated_taf=translate_forecast(taf),
        fetched_at=datetime.now(timezone.utc).isoformat(),
    )


@app.get("/api/recent", response_model=RecentSearches)
def recent():
    return RecentSearches(stations=recent_searches.get())


@app.delete("/api/recent", response_model=RecentSearches)
def clear_recent():
    recent_searches.clear()
    logger.info("🧹 Cleared recent searches")
    return RecentSearches(stations=[])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3001")))
