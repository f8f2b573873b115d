from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from typing import Callable, Optional
import logging
import random
import time
from region_router.config import Settings, get_settings
from region_router.connection import select_connection
from region_router.database import Database
from region_router.models import HealthResponse, QueryResponse, RoutingConfig
from region_router.replay import intercept_failure

FRUITS = ["orange", "lemon", "blueberry", "blackberry", "grape"]

DatabaseFactory = Callable[[RoutingConfig, Settings], Database]

def create_app(
    settings: Optional[Settings] = None,
    database_factory: DatabaseFactory = Database.from_routing,
) -> FastAPI:
    """
    Build the API. Settings are read and the database chosen once, when the
    app starts, and kept on app.state for the life of the process.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan context manager"""
        # Startup
        app_settings = settings or get_settings()
        logging.basicConfig(
            level=app_settings.log_level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        # Raises ConfigurationError without a DATABASE_URL, so the app never starts
        routing = select_connection(app_settings)
        database = database_factory(routing, app_settings)
        await database.connect()

        app.state.routing = routing
        app.state.database = database
        print(f"Region router started in {routing.fly_region} using {routing.database_host}")

        yield

        # Shutdown
        await database.close()
        print("Region router stopped")

    app = FastAPI(title="Region Router", version="1.0.0", lifespan=lifespan)

    @app.get("/", response_class=PlainTextResponse)
    async def hello():
        return "hello world"

    @app.get("/read", response_model=QueryResponse)
    async def read_fruits(request: Request):
        """Latest three fruits, read from whichever database is closest"""
        routing = request.app.state.routing
        start_time = time.time()
        try:
            rows = await request.app.state.database.fetch_all(
                "SELECT * FROM fruits ORDER BY id DESC LIMIT 3"
            )
        except Exception as e:
            return intercept_failure(e, routing)

        return QueryResponse(
            time_ms=round((time.time() - start_time) * 1000, 2),
            fly_region=routing.fly_region,
            is_primary_region=routing.is_primary_region,
            database_host=routing.database_host,
            data=rows,
        )

    @app.get("/write", response_model=QueryResponse)
    async def write_fruit(request: Request):
        """
        Add a random fruit. On a read replica this fails and the request is
        replayed in the primary region.
        """
        routing = request.app.state.routing
        fruit = random.choice(FRUITS)
        start_time = time.time()
        try:
            row_id = await request.app.state.database.execute(
                "INSERT INTO fruits (name) VALUES (%s)", (fruit,)
            )
        except Exception as e:
            return intercept_failure(e, routing)

        return QueryResponse(
            time_ms=round((time.time() - start_time) * 1000, 2),
            fly_region=routing.fly_region,
            is_primary_region=routing.is_primary_region,
            database_host=routing.database_host,
            data=f"Added a row with ID {row_id}",
        )

    @app.get("/health", response_model=HealthResponse)
    async def health(request: Request):
        """Health check with routing diagnostics"""
        routing = request.app.state.routing
        database_healthy = await request.app.state.database.is_healthy()
        return HealthResponse(
            status="healthy" if database_healthy else "degraded",
            fly_region=routing.fly_region,
            primary_region=routing.primary_region,
            is_primary_region=routing.is_primary_region,
            database_host=routing.database_host,
            database_healthy=database_healthy,
        )

    return app

app = create_app()
