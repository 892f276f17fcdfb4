"""FastAPI application entrypoint.

This module assembles the student management backend: it creates the
tables, installs the request-context middleware and mounts one CRUD
router per resource (see `controllers` for the route table).

Endpoints implemented:
- /students, /departments, /courses, /enrollments (list/get/create/update/delete)
- GET /health
"""

import json
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .config import settings
from .controllers import course_router, department_router, enrollment_router, student_router
from .database import create_db_and_tables

app = FastAPI(title="Student Management API")
logger = logging.getLogger("student_management.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Browser frontends served from file:// or localhost need open CORS during development.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

create_db_and_tables()

app.include_router(student_router)
app.include_router(department_router)
app.include_router(course_router)
app.include_router(enrollment_router)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "request_done %s",
        json.dumps(
            {
                "request_id": req_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
            },
            ensure_ascii=True,
        ),
    )
    return response


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
