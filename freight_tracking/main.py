import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from freight_tracking.routers.tracking import router as tracking_router

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(title="Freight Tracking Engine")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tracking_router)

@app.get("/")
async def root():
    return {"status": "ONLINE", "engine": "Freight Tracking V1"}
