from .jsonlog import log_json, utc_iso

__all__ = ["log_json", "utc_iso"]
