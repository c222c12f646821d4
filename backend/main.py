from dotenv import load_dotenv
load_dotenv()

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from errors import RecipeHubError
from routes import recipes, users
from stores.recipes import RecipeStore
from stores.seed import SEED_RECIPES
from stores.sessions import SessionStore

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


async def handle_recipehub_error(request: Request, exc: RecipeHubError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def handle_validation_error(request: Request, exc: RequestValidationError):
    # Malformed bodies are client input errors like any other missing field.
    # Unparseable JSON lands here before the auth dependency runs, so it is 400 even without a token.
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})


def create_app(*, seed: Optional[bool] = None) -> FastAPI:
    """
    Build an app with its own fresh pair of in-memory stores.

    Seeding and CORS origins follow config unless `seed` is given.
    """
    if seed is None:
        seed = config.LOAD_SEED

    app = FastAPI(title="RecipeHub API", version="0.1.0")

    app.state.session_store = SessionStore()
    app.state.recipe_store = RecipeStore(SEED_RECIPES if seed else ())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RecipeHubError, handle_recipehub_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    app.include_router(users.router)
    app.include_router(recipes.router)

    @app.get("/")
    def health():
        return {"status": "ok", "service": "recipehub"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
