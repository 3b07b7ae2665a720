import uvicorn
import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tablebook.infrastructure.config import settings
from tablebook.infrastructure.database import Base, engine
from tablebook.presentation import frontend
from tablebook.presentation.exception_handlers import register_exception_handlers
from tablebook.presentation.routers import router
from tablebook.services.reservation_service import store

app = FastAPI(title="tablebook")


# Use the contractual schema
def custom_openapi():
    with open(settings.openapi_path) as f:
        return yaml.safe_load(f)


@app.on_event("startup")
def _seed_tables_on_startup() -> None:
    """
    On startup install the configured table set into the in-memory DB.
    """
    store.seed(settings.tables)


app.openapi = custom_openapi
Base.metadata.create_all(bind=engine)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)
app.include_router(router)
app.include_router(frontend.router)


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
