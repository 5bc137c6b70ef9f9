"""
FastAPI Server for the Places Extractor

Provides API endpoints for:
- Inspecting the current search session (status, map view, results)
- Running a keyword search
- Downloading the results as places.csv
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .config import API_HOST, API_PORT
from .config_manager import ExtractorConfig
from .extraction import SearchSessionController


# Request Models
class SearchRequest(BaseModel):
    keyword: str


def session_snapshot(controller: SearchSessionController) -> Dict[str, Any]:
    """Everything the result panel and map need to render."""
    state = controller.state
    return {
        "status": state.status.value,
        "keyword": state.keyword,
        "map": controller.map_view,
        "message": controller.status_message,
        "can_search": controller.can_search,
        "can_export": controller.can_export,
        "results": [place.to_dict() for place in state.results],
    }


def create_app(
    controller: Optional[SearchSessionController] = None,
    config: Optional[ExtractorConfig] = None,
    locate: bool = True,
) -> FastAPI:
    """Build the API app around one search session.

    Args:
        controller: Session to serve. Built from config when omitted.
        config: Configuration used to build the default controller.
        locate: Whether the default controller geolocates on startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        session = controller or SearchSessionController.from_config(
            config or ExtractorConfig(), locate=locate
        )
        await session.initialize()
        app.state.controller = session
        try:
            yield
        finally:
            await session.aclose()

    app = FastAPI(title="Places Extractor API", lifespan=lifespan)

    # Enable CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/session")
    async def get_session(request: Request):
        """Return the current session snapshot."""
        return session_snapshot(request.app.state.controller)

    @app.post("/api/search")
    async def search(body: SearchRequest, request: Request):
        """Run a keyword search and return the resulting session."""
        session = request.app.state.controller
        if not await session.search(body.keyword):
            raise HTTPException(
                status_code=400,
                detail="Search ignored: keyword is empty or the places provider is not ready",
            )
        return session_snapshot(session)

    @app.get("/api/export")
    async def export_csv(request: Request):
        """Download the current results as places.csv."""
        session = request.app.state.controller
        data = session.export()
        if data is None:
            return Response(status_code=204)
        return Response(
            content=data,
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{session.export_filename}"'},
        )

    return app


app = create_app()


def run_server(
    host: str = API_HOST,
    port: int = API_PORT,
    config: Optional[ExtractorConfig] = None,
    locate: bool = True,
):
    """Run the API server, with a custom configuration if one is given."""
    import uvicorn
    server_app = app if config is None else create_app(config=config, locate=locate)
    uvicorn.run(server_app, host=host, port=port)


if __name__ == "__main__":
    run_server()
