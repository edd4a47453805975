"""
PaletteKit ID Utilities
Generate unique IDs for tracing palette extractions in logs.
"""
import uuid
from datetime import datetime


def generate_extraction_id() -> str:
    """
    Generate a unique extraction ID for log correlation.

    Returns:
        ID string of the form ``pal-<YYYYmmddHHMMSS>-<8 hex>``
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"pal-{timestamp}-{short_uuid}"
