import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from userhub.modules.settings import LOG_LEVEL, get_cors_origins
from userhub.modules.database import database, connect_to_db, disconnect_from_db, init_db
from userhub.modules.errors import register_error_handlers
from userhub.modules.users.api import user_router
from userhub.modules.users.repositories import UserRepository
from userhub.modules.users.services import UserService, UserStore

logger = logging.getLogger("userhub.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logging.basicConfig(level=LOG_LEVEL)
    db = app.state.database
    if db is not None:
        await connect_to_db(db)
        await init_db(db)
    logger.info("UserHub started")
    yield
    # Shutdown
    if db is not None:
        await disconnect_from_db(db)


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """
    Build the API application.

    With no store the app runs against the configured database. Passing a
    store (e.g. an in-memory double) skips the database lifecycle entirely.
    """
    app = FastAPI(title="UserHub", version="0.1.0", lifespan=lifespan)

    if store is None:
        app.state.database = database
        app.state.user_store = UserService(UserRepository(database))
    else:
        app.state.database = None
        app.state.user_store = store

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(user_router)

    @app.get("/")
    async def root():
        return {"status": "online", "system": "UserHub"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    from userhub.modules.settings import HOST, PORT

    uvicorn.run(app, host=HOST, port=PORT)
