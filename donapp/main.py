from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from .config import config
from .routes import api, pages
from .sync import SyncController
from .utils.custom_exception import CustomMessageException


@asynccontextmanager
async def load_donations(app_: FastAPI):
    controller = SyncController()
    app_.state.controller = controller
    await controller.load_all()

    yield


app = FastAPI(
    lifespan=load_donations,
    debug=config.is_debug,
    openapi_url="/openapi.json" if config.is_debug else None,
    root_path=config.root_path,
)

app.include_router(api.router)
app.include_router(pages.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_, exc: RequestValidationError) -> JSONResponse:
    result = []
    for err in exc.errors():
        loc = ".".join([str(l) for l in err["loc"][1:]])
        if loc:
            loc = f"[{loc}] "
        result.append(f"{loc}{err['msg']}")

    return JSONResponse({
        "errors": result,
    }, status_code=422)


@app.exception_handler(CustomMessageException)
async def custom_message_exception_handler(_, exc: CustomMessageException) -> JSONResponse:
    return JSONResponse({
        "errors": exc.messages,
    }, status_code=exc.status_code)
