#!/usr/bin/env python3

"""
Run the NAPPI autocomplete API server.
"""

import uvicorn
import sys
import os

# Add the source tree to the Python path
sys.path.append(os.path.join(os.path.abspath(os.path.dirname(__file__)), "src"))

from nappi_lookup.api import create_app
from nappi_lookup.config import get_config, get_int_config
from nappi_lookup.logger import get_logger

logger = get_logger("nappi_lookup")

if __name__ == "__main__":
    host = get_config("NAPPI_API_HOST")
    port = get_int_config("NAPPI_API_PORT")

    logger.info(f"Starting NAPPI autocomplete server on {host}:{port}")
    print("Starting NAPPI autocomplete API server...")
    print("Available endpoints:")
    print("  GET  /                    - API info")
    print("  GET  /autocomplete        - Search products by keywords")
    print("  GET  /api/stats           - Catalog statistics")
    print("  GET  /api/health          - Health check")
    print()
    print("Example curl commands:")
    print(f"  curl 'http://localhost:{port}/autocomplete?term=asp%20tab'")
    print(f"  curl 'http://localhost:{port}/api/stats'")
    print()

    uvicorn.run(
        create_app(),
        host=host,
        port=port,
        log_level="info"
    )
