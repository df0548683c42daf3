from fastapi import APIRouter

health_router = APIRouter(
    tags=["Health"]
)


@health_router.get("/", tags=["Health"])
def base_path():
    """
    Root endpoint listing the available routes.

    Returns:
        dict: A message and the endpoint overview.
    """
    return {
        "message": "RSVP API Server",
        "endpoints": {
            "health": "GET /api/health",
            "counts": "GET /api/rsvp/counts",
            "rsvp": "POST /api/rsvp"
        }
    }


@health_router.get("/api/health", tags=["Health"])
def health():
    return {"status": "ok", "message": "Server is running"}
