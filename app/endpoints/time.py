from fastapi import APIRouter, Depends, Request
import logging

from app.clock import Clock
from app.errors import ClockReadError
from app.formatter import format_current_time
from app.models import CurrentTime

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Time"])


def get_clock(request: Request) -> Clock:
    """Return the clock the application was created with."""
    return request.app.state.clock


@router.get(
    "/time",
    response_model=CurrentTime,
    operation_id="GetTime",
    summary="Get the current date and time in various formats",
)
def get_time(clock: Clock = Depends(get_clock)) -> CurrentTime:
    try:
        now = clock.now()
    except Exception as e:
        raise ClockReadError(f"Failed to read the current time: {e}") from e

    current_time = format_current_time(now)
    logger.debug("Served time snapshot %s", current_time.universal_sortable)

    return current_time
