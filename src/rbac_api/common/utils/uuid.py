"""
UUID utilities for generating UUIDv7 identifiers.

Record keys are generated client-side so that a new record never has to be
created empty first; UUIDv7 keys sort by creation time like store push keys.
"""

import uuid
import time
import random


def generate_uuid_v7() -> str:
    """Generate a UUIDv7 identifier.
    
    UUIDv7 provides:
    - Time-ordered IDs for key-ordered stores
    - Millisecond precision timestamps
    - Uniqueness guarantees
    
    Returns:
        String representation of UUIDv7
    """
    timestamp_ms = int(time.time() * 1000)
    
    # 48 bits timestamp, 4 bits version, 12 bits random, 2 bits variant, 62 bits random
    timestamp_bytes = timestamp_ms.to_bytes(6, byteorder='big')
    random_bytes = random.getrandbits(80).to_bytes(10, byteorder='big')
    
    uuid_bytes = bytearray(timestamp_bytes + random_bytes)
    uuid_bytes[6] = (uuid_bytes[6] & 0x0F) | 0x70
    uuid_bytes[8] = (uuid_bytes[8] & 0x3F) | 0x80
    
    return str(uuid.UUID(bytes=bytes(uuid_bytes)))

