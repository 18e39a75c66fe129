"""
Main entrypoint for the Post Store API.

This module assembles the FastAPI application, sets up logging,
registers the error handler and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn post_store_api.app.main:app --reload

Each application built by ``create_app`` owns its own empty
:class:`PostService`, stored on ``app.state.post_service``; all data is
lost when the process exits.
"""

import logging

from fastapi import FastAPI

from .core.config import settings
from .core.errors import PostStoreError, post_store_error_handler
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.post_service import PostService


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with an empty post
        store.
    """
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.post_service = PostService()

    app.add_exception_handler(PostStoreError, post_store_error_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).info(
        "%s %s ready, posts mounted at %s/posts",
        settings.project_name,
        settings.api_version,
        settings.api_prefix,
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
