"""
Django-Q tasks for slide housekeeping.
"""
import logging
from slides_app.services import clear_expired_snoozes as _clear_expired_snoozes

logger = logging.getLogger(__name__)


def clear_expired_snoozes():
    """
    Clear temp_unpublish_until values that have already expired.

    This is the function Django-Q runs from the daily schedule registered by
    the `schedule_snooze_cleanup` management command.
    """
    logger.info("[TASK] Clearing expired temporary unpublish timestamps")
    cleared = _clear_expired_snoozes()
    logger.info(f"[TASK] Cleared {cleared} expired snooze(s)")
    return cleared
