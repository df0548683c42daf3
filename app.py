import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import config
from logging_config import setup_logging
from models import RsvpError
from routes.health_route import health_router
from routes.rsvp_route import rsvp_router

setup_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="RSVP API Server")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(RsvpError)
async def rsvp_error_handler(request: Request, exc: RsvpError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Invalid request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Invalid request body"},
    )


app.include_router(health_router)
app.include_router(rsvp_router)


if __name__ == "__main__":
    logger.info("Server running on http://localhost:%s", config.PORT)
    logger.info("Google Sheet ID: %s", config.GOOGLE_SHEET_ID)
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
