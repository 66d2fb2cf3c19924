"""FastAPI application exposing the settlement engine."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from betting.log import setup_logging


def create_app() -> FastAPI:
    setup_logging("betting")

    app = FastAPI(
        title="Golf Betting Settlement API",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import settlement, standings
    app.include_router(settlement.router, prefix="/api/settlement", tags=["settlement"])
    app.include_router(standings.router, prefix="/api/standings", tags=["standings"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
