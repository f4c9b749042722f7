"""
vmnet interface identity resolution
"""

import logging
import uuid
from dataclasses import replace
from typing import Optional

from .config import RawOptions, NIL_UUID

logger = logging.getLogger(__name__)


def is_nil(interface_id: Optional[uuid.UUID]) -> bool:
    """True if no usable interface ID was given (missing or all-zero)"""
    return interface_id is None or interface_id == NIL_UUID


def resolve_interface_id(options: RawOptions) -> RawOptions:
    """Replace a missing or all-zero interface ID with a random (version 4) one"""
    if not is_nil(options.interface_id):
        return replace(options)

    interface_id = uuid.uuid4()
    logger.debug(f"Generated vmnet interface ID {interface_id}")
    return replace(options, interface_id=interface_id)
