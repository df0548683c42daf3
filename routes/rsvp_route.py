import logging
import threading
from contextlib import nullcontext
from datetime import UTC, datetime

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse

import config
from helper import (
    APPEND_RANGE,
    build_confirmation_html,
    check_slot_capacity,
    format_rsvp_number,
    get_next_rsvp_number,
    get_slot_counts,
    validate_rsvp,
)
from mailer import is_configured, send_confirmation_email
from models import *
from sheet import SheetClient, get_sheet

logger = logging.getLogger(__name__)

rsvp_router = APIRouter(
    prefix="/api",
    tags=["RSVP"]
)

# Nur innerhalb eines Prozesses wirksam
_submission_lock = threading.Lock()


def _submission_guard():
    return _submission_lock if config.SERIALIZE_SUBMISSIONS else nullcontext()


@rsvp_router.get("/rsvp/counts", tags=["RSVP"])
def get_counts(sheet: SheetClient = Depends(get_sheet)):
    """
    Returns the number of RSVPs per timeslot.

    If the sheet is unreachable the counts are all zero and ``degraded``
    is set, the request itself still succeeds.

    Returns:
        dict: A success flag, the counts per slot and the degraded flag.
    """
    try:
        counts, degraded = get_slot_counts(sheet)
        return {"success": True, "counts": counts, "degraded": degraded}
    except Exception:
        logger.exception("Error in counts endpoint")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Failed to get counts"},
        )


@rsvp_router.post("/rsvp", tags=["RSVP"])
def create_rsvp(rsvp: Rsvp, background_tasks: BackgroundTasks, sheet: SheetClient = Depends(get_sheet)):
    """
    Stores a new RSVP and returns its confirmation number.

    Args:
        rsvp (Rsvp): Name, timeslot and optional email of the guest.

    Returns:
        dict: A success flag and the zero-padded confirmation number.
    """
    logger.info("Received RSVP request: name=%r time=%r", rsvp.name, rsvp.time)
    rsvp = validate_rsvp(rsvp)

    try:
        with _submission_guard():
            counts, _ = get_slot_counts(sheet)
            logger.info("Current counts: %s", counts)
            check_slot_capacity(rsvp.time, counts)

            number = get_next_rsvp_number(sheet)
            formatted_number = format_rsvp_number(number)

            record = RsvpRecord(
                number=number,
                name=rsvp.name,
                time=rsvp.time,
                timestamp=datetime.now(UTC).isoformat(),
                email=rsvp.email or "",
            )
            sheet.append_rows(APPEND_RANGE, [record.to_row()])
            logger.info("Stored RSVP %s for slot %s", formatted_number, rsvp.time)

    except RsvpError:
        raise

    except Exception:
        logger.exception("Error processing RSVP")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Failed to process RSVP. Please try again."},
        )

    if rsvp.email and is_configured():
        html = build_confirmation_html(formatted_number, rsvp.name, rsvp.time)
        background_tasks.add_task(send_confirmation_email, rsvp.email, html)

    return {
        "success": True,
        "number": formatted_number,
        "message": "RSVP confirmed!"
    }
