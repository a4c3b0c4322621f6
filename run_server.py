#!/usr/bin/env python
"""
Run the API Server

Starts the FastAPI server for geohash coverage.

Usage:
    python run_server.py

The server runs on http://localhost:8000 (GEOHASH_API_PORT to change)

Endpoints:
    GET  /api/health            - Health check
    GET  /api/geohash/{geohash} - Decode a geohash
    POST /api/coverage          - Compute country coverage
"""

from geohash_coverage.config import API_HOST, API_PORT

import uvicorn
uvicorn.run("geohash_coverage.server:app", host=API_HOST, port=API_PORT, reload=False)
