# pawsroam/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pawsroam.core.config import settings
from pawsroam.graphql.router import graphql_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"PawsRoam venue service starting up (env={settings.ENV})")
    yield
    logger.info("PawsRoam venue service shutting down")


app = FastAPI(
    title="PawsRoam Venue Service",
    version="1.0.0",
    description="""
        **PawsRoam Venue Service**

        GraphQL API for pet-friendly venue discovery, reviews and venue
        ownership claims.

        ## Authentication

        Mutations require a JWT via the `Authorization: Bearer <token>` header.
        Venue search and venue detail queries are public.
        """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(graphql_router, prefix="/graphql")


@app.get("/")
def read_root():
    return {"status": "PawsRoam Backend is Running!"}
