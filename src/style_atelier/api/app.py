"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, HTTPException, Request, Response, UploadFile

from style_atelier.api.schemas import PromptUpdate, SessionSnapshot
from style_atelier.app_logging import configure_logging
from style_atelier.containers import AppContainer
from style_atelier.services.encoder import decode_data_url, extension_for
from style_atelier.services.sessions import StyleSession


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Using image model %s", container.settings.gemini_model)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/session")
    async def get_session(request: Request) -> SessionSnapshot:
        """Return the current session state and history."""
        return SessionSnapshot.from_session(_session(request))

    @app.post("/session/image")
    async def upload_image(
        request: Request, file: UploadFile | None = File(default=None)
    ) -> SessionSnapshot:
        """Load a new original image and start a fresh edit."""
        session = _session(request)
        await session.handle_file_upload(file)
        return SessionSnapshot.from_session(session)

    @app.put("/session/prompt")
    async def update_prompt(body: PromptUpdate, request: Request) -> SessionSnapshot:
        """Replace the styling request text."""
        session = _session(request)
        session.set_prompt(body.prompt)
        return SessionSnapshot.from_session(session)

    @app.post("/session/generate")
    async def generate(request: Request) -> SessionSnapshot:
        """Submit the current image and prompt to the image service."""
        session = _session(request)
        attempted = await session.handle_generate()
        if not attempted:
            logger.info("Generate request ignored in status %s", session.state.status)
        return SessionSnapshot.from_session(session)

    @app.post("/session/reset")
    async def reset(request: Request) -> SessionSnapshot:
        """Clear the image, result, prompt and error."""
        session = _session(request)
        session.reset()
        return SessionSnapshot.from_session(session)

    @app.post("/session/history/{entry_id}/select")
    async def select_history(entry_id: str, request: Request) -> SessionSnapshot:
        """Show a past result again."""
        session = _session(request)
        if session.select_history(entry_id) is None:
            raise HTTPException(status_code=404, detail="History entry not found")
        return SessionSnapshot.from_session(session)

    @app.get("/session/result/download")
    async def download_result(request: Request) -> Response:
        """Return the displayed result image as a file download."""
        result = _session(request).state.result_image
        if not result:
            raise HTTPException(status_code=404, detail="No result image")
        try:
            mime_type, content = decode_data_url(result)
        except ValueError as exc:
            logger.warning("Stored result image is not decodable: %s", exc)
            raise HTTPException(
                status_code=502, detail="Result image could not be decoded"
            ) from exc
        filename = f"my-style.{extension_for(mime_type)}"
        return Response(
            content=content,
            media_type=mime_type,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app


def _session(request: Request) -> StyleSession:
    state_container: AppContainer = request.app.state.container
    return state_container.session
