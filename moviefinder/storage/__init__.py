from moviefinder.storage.models import MovieRecord
from moviefinder.storage.record_cache import RecordCache
from moviefinder.storage.tsv_reader import read_title_records

__all__ = [
    "MovieRecord",
    "RecordCache",
    "read_title_records",
]
