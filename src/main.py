import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.endpoints import router
from api.schemas import ErrorResponse
from core.config import HOST, PORT, STARTUP_POLL_SECONDS
from core.errors import InvoiceError
from core.logging import logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Manages startup and shutdown events for the FastAPI app."""
    logger.info("Application startup...")
    yield
    logger.info("Application shutdown...")


async def invoice_error_handler(_: Request, exc: InvoiceError) -> JSONResponse:
    """Renders an InvoiceError as its JSON error body."""
    body = ErrorResponse(error=exc.error, details=exc.details)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )


def create_app() -> FastAPI:
    app = FastAPI(title="Invoice Processing API", lifespan=lifespan)
    app.include_router(router)
    app.add_exception_handler(InvoiceError, invoice_error_handler)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Simple root endpoint with welcome msg."""
        return {"message": "Welcome to the AI-powered invoice processing API"}

    return app


app = create_app()


async def wait_until_started(server: uvicorn.Server, serving: asyncio.Task) -> bool:
    """Waits until uvicorn has bound its socket, or has stopped trying to."""
    while not server.started and not serving.done():
        await asyncio.sleep(STARTUP_POLL_SECONDS)
    return server.started


async def run_server(host: str = HOST, port: int = PORT) -> None:
    """Runs the API with uvicorn, logging once the listener is bound."""
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port))
    serving = asyncio.create_task(server.serve())
    if await wait_until_started(server, serving):
        logger.info(f"Server is running on port {port}")
    await serving


def serve() -> None:
    """Runs the API on the fixed host and port."""
    asyncio.run(run_server())


if __name__ == "__main__":
    serve()
