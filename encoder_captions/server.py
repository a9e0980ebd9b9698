"""FastAPI host for one encoder caption session."""

from __future__ import annotations

import logging
from typing import Any
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

from encoder_captions.state import RuntimeDeps
from encoder_captions.handlers import SessionConfigRequest
from encoder_captions.runtime.logging import configure_logging
from encoder_captions.runtime.dependencies import build_runtime_deps
from encoder_captions.config.variables import CONFIG_FIELDS, VARIABLE_DEFINITIONS

logger = logging.getLogger(__name__)

configure_logging()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    runtime_deps = await build_runtime_deps()
    app.state.runtime_deps = runtime_deps
    runtime_deps.instance.init(runtime_deps.settings.session)
    logger.info("runtime: ready")
    try:
        yield
    finally:
        deps = getattr(app.state, "runtime_deps", None)
        if deps is not None:
            await deps.shutdown()


app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)


def _runtime_deps(request: Request) -> RuntimeDeps:
    runtime_deps = getattr(request.app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


def _status_payload(runtime_deps: RuntimeDeps) -> dict[str, Any]:
    instance = runtime_deps.instance
    supervisor = instance.supervisor
    last_error = supervisor.last_error if supervisor is not None else None
    return {
        "status": instance.status.status.value,
        "message": instance.status.message,
        "phase": supervisor.phase.value if supervisor is not None else None,
        "last_error": str(last_error) if last_error is not None else None,
    }


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/captions")
async def captions(request: Request) -> dict[str, str]:
    return {"captions": _runtime_deps(request).instance.captions}


@app.get("/status")
async def status(request: Request) -> dict[str, Any]:
    return _status_payload(_runtime_deps(request))


@app.get("/variables")
async def variables() -> list[dict[str, str]]:
    return VARIABLE_DEFINITIONS


@app.get("/config/fields")
async def config_fields() -> list[dict[str, Any]]:
    return CONFIG_FIELDS


@app.get("/config")
async def get_config(request: Request) -> dict[str, Any]:
    runtime_deps = _runtime_deps(request)
    config = runtime_deps.instance.config or runtime_deps.settings.session
    return SessionConfigRequest.from_session_config(config).model_dump(by_alias=True)


@app.put("/config")
async def put_config(body: SessionConfigRequest, request: Request) -> dict[str, Any]:
    runtime_deps = _runtime_deps(request)
    runtime_deps.instance.config_updated(body.to_session_config())
    return _status_payload(runtime_deps)


__all__ = ["app"]
