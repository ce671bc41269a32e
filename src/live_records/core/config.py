"""Configuration for the record list.

Defines the tunable behaviour of the reconciliation engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass
class RecordListConfig:
    """Configuration parameters for a record list.

    Attributes:
        label: Name used in log lines; defaults to str(reference)
        emit_values_on_teardown: Emit aggregate value events while a reset
            drains active records
        orphan_log_level: Log level for updates to keys no longer tracked
    """

    label: str | None = None
    emit_values_on_teardown: bool = False
    orphan_log_level: int = logging.DEBUG
