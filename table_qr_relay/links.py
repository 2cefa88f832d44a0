"""
Deep links into the ordering bot, one per table and session start.
"""

import re
from datetime import datetime
from typing import Optional

from .config import BOT_LINK_HOST, BOT_NAME

_WHITESPACE = re.compile(r'\s+')


def table_identifier(table_name: str) -> str:
    """``"a 1"`` -> ``"tableA1"``"""
    return 'table' + _WHITESPACE.sub('', table_name).upper()


def session_timestamp(now: datetime) -> str:
    """Local time as ``2025-10-20_19-34-52``."""
    return now.strftime('%Y-%m-%d_%H-%M-%S')


def build_deep_link(table_name: str, now: Optional[datetime] = None,
                    host: str = BOT_LINK_HOST, bot_name: str = BOT_NAME) -> str:
    """Link that starts a bot session for ``table_name`` at ``now``."""
    now = now or datetime.now()
    start = f'{table_identifier(table_name)}_{session_timestamp(now)}'
    return f'https://{host}/{bot_name}?start={start}'
