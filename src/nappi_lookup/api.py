"""
FastAPI application exposing NAPPI product autocomplete.
"""

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from typing import Any, Dict, Optional
from contextlib import asynccontextmanager
import time
import logging

import sdnotify

from .catalog import NappiCatalog
from .config import get_config
from .errors import CatalogNotLoadedError, InvalidQueryError
from .search import validate_term

logger = logging.getLogger(__name__)

router = APIRouter()


def get_catalog(request: Request) -> NappiCatalog:
    return request.app.state.catalog


@router.get("/")
async def root():
    """Root endpoint with basic info."""
    return {
        "message": "NAPPI Autocomplete API",
        "version": "1.0.0",
        "endpoints": {
            "autocomplete": "/autocomplete?term=...",
            "stats": "/api/stats",
            "health": "/api/health"
        }
    }


@router.get("/autocomplete")
def autocomplete(
    term: str = Query("", description="Search keywords (product name fragments)"),
    catalog: NappiCatalog = Depends(get_catalog),
) -> Dict[str, Any]:
    """
    Search for products whose name contains every keyword of the term.

    Args:
        term: Whitespace separated keywords, at least 3 characters in total.
              Keywords shorter than 3 characters are ignored.

    Returns:
        JSON response with the matching products
    """
    try:
        validate_term(term)
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=str(e))

    start_time = time.time()

    try:
        results = catalog.search(term)
    except CatalogNotLoadedError as e:
        logger.error(f"Autocomplete requested before catalog load: {e}")
        raise HTTPException(status_code=503, detail=str(e))
    except Exception as e:
        logger.error(f"Autocomplete error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    response_time = (time.time() - start_time) * 1000  # Convert to milliseconds
    logger.info(f"Query {term!r} returned {len(results)} results in {response_time:.2f} ms")

    return {
        "results": [record.to_dict() for record in results],
        "count": len(results),
        "response_time_ms": round(response_time, 2),
    }


@router.get("/api/stats")
def get_stats(catalog: NappiCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    """
    Get statistics about the loaded catalog.
    """
    try:
        return {
            "service": "nappi_autocomplete",
            "stats": catalog.get_stats(),
            "success": True
        }
    except Exception as e:
        logger.error(f"Stats error: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/health")
def health_check(catalog: NappiCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    """
    Health check endpoint.
    """
    try:
        stats = catalog.get_stats()
        return {
            "status": "healthy" if stats["loaded"] else "unhealthy",
            "loaded": stats["loaded"],
            "generation": stats["generation"],
            "total_entries": stats["total_entries"],
            "success": True
        }
    except Exception as e:
        logger.error(f"Health check error: {e}")
        return {
            "status": "unhealthy",
            "error": str(e),
            "success": False
        }


def create_app(catalog: Optional[NappiCatalog] = None) -> FastAPI:
    """
    Build the API around a catalog.

    The catalog is loaded on startup; a failed load aborts startup.

    Args:
        catalog: Catalog to serve. Built from NAPPI_DATA_FILE when omitted.
    """
    if catalog is None:
        catalog = NappiCatalog(get_config("NAPPI_DATA_FILE"))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the NAPPI file into memory when the application starts."""
        try:
            logger.info("Starting up NAPPI catalog...")
            catalog.load()
            logger.info("NAPPI catalog ready!")
        except Exception as e:
            logger.error(f"Failed to load NAPPI catalog: {e}")
            raise
        # No-op unless running under systemd
        sdnotify.SystemdNotifier().notify("READY=1")
        yield

    app = FastAPI(
        title="NAPPI Autocomplete API",
        description="Keyword autocomplete over the NAPPI product file",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.catalog = catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app
