from datetime import datetime

import pytz

from boxoffice.core.config import settings


def now_local_naive() -> datetime:
    """Current wall-clock time in the box office's timezone, without tzinfo."""
    return datetime.now(pytz.timezone(settings.TIMEZONE)).replace(tzinfo=None)
