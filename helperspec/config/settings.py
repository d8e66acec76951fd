from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import structlog

log = structlog.get_logger(__name__)

DEFAULT_ENCODING = "utf-8"

class LogLevel(Enum):
    # log levels accepted from config files and the command line.
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def from_string(cls, s: Optional[str]) -> "LogLevel":
        if not s:
            return cls.WARNING
        try:
            return cls(s.lower())
        except ValueError:
            log.warning("invalid_log_level_string", input_string=s)
            return cls.WARNING

@dataclass
class HelperSettings:
    # holds all configuration parameters for a single run.
    log_level: LogLevel = LogLevel.WARNING
    force_json_logs: bool = False
    helper_modules: List[str] = field(default_factory=list)
    encoding: str = DEFAULT_ENCODING
