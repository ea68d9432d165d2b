# tagbridge/formatting/__init__.py
from tagbridge.formatting.encoding import encode_name, percent_encode
from tagbridge.formatting.formatter import ENCODED_NAME_FIELD, SUMMARY_FIELD, EntryFormatter

__all__ = [
    "encode_name",
    "percent_encode",
    "EntryFormatter",
    "ENCODED_NAME_FIELD",
    "SUMMARY_FIELD",
]
