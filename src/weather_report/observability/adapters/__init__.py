from .json_lines import JsonLinesLogSink, log_jsonl, log_stderr

__all__ = ["JsonLinesLogSink", "log_jsonl", "log_stderr"]
