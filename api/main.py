import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import elevation, framing
from api.services.elevation import CLIENT

app = FastAPI(title="Globe Framing API", version="0.1.0")

default_origins = [
    "http://localhost:5173",
    "http://localhost:3000",
]
cors_origins = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", ",".join(default_origins)).split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root() -> dict[str, object]:
    return {
        "service": "globe-framing",
        "status": "ok",
        "docs": "/docs",
        "endpoints": ["/framing/look-at", "/framing/fly-to", "/framing/padding", "/elevation"],
    }


@app.get("/health")
async def health() -> dict[str, object]:
    return {
        "status": "ok",
        "elevation": {"url": CLIENT.url, "timeout": CLIENT.timeout},
    }


app.include_router(framing.router, prefix="/framing", tags=["framing"])
app.include_router(elevation.router, prefix="/elevation", tags=["elevation"])
