# tagbridge/ingestion/__init__.py
from tagbridge.ingestion.records import RawTagRecord, decode_records, order_records
from tagbridge.ingestion.engine import FileResult, TagIngester

__all__ = [
    "RawTagRecord",
    "decode_records",
    "order_records",
    "FileResult",
    "TagIngester",
]
