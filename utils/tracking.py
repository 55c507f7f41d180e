"""Tracking helpers: sortable ids and microsecond timestamps.

Ids are KSUIDs: a 4 byte big-endian second counter from the KSUID epoch
followed by 16 random bytes, base62 encoded to a fixed 27 characters.
"""

import os
import struct
import time
from datetime import datetime, timezone

KSUID_EPOCH = 1400000000
KSUID_LENGTH = 27
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def now_micros():
    """Microseconds since the Unix epoch."""
    return int(time.time() * 1_000_000)


def format_timestamp(epoch_us=None):
    """ISO 8601 UTC timestamp with microseconds and a trailing Z."""
    if epoch_us is None:
        epoch_us = now_micros()
    moment = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


def generate_ksuid():
    seconds = int(time.time()) - KSUID_EPOCH
    value = int.from_bytes(struct.pack(">I", seconds) + os.urandom(16), byteorder="big")

    digits = []
    while value:
        value, rem = divmod(value, 62)
        digits.append(BASE62[rem])
    return "".join(reversed(digits)).rjust(KSUID_LENGTH, "0")


def ksuid_seconds(ksuid):
    """Unix seconds encoded in the leading bytes of a KSUID."""
    value = 0
    for char in ksuid:
        value = value * 62 + BASE62.index(char)
    return (value >> 128) + KSUID_EPOCH
