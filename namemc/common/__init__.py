from .logging import JsonFormatter, configure_json_logging

__all__ = ["JsonFormatter", "configure_json_logging"]
