#!/usr/bin/env python
"""
Run the API Server

Starts the FastAPI server for nearby place search and CSV export.

Usage:
    GMAPS_API_KEY=... python run_server.py

The server runs on http://localhost:8000

Endpoints:
    GET  /api/health   - Health check
    GET  /api/session  - Current search session
    POST /api/search   - Run a keyword search
    GET  /api/export   - Download places.csv
"""

import uvicorn

uvicorn.run("places_extractor.server:app", host="0.0.0.0", port=8000, reload=False)
