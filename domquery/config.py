from dataclasses import dataclass
from typing import List, Optional
from . import __version__


@dataclass
class ParserConfig:
    """Configuration for the parser and renderer collaborators"""
    features: str = "html5lib"            # BeautifulSoup tree builder
    from_encoding: Optional[str] = None   # Only used for bytes input


@dataclass
class RetryConfig:
    """Configuration for retry behavior"""
    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    jitter: bool = True
    retryable_errors: List = None

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.retryable_errors is None:
            from .error_handler import ErrorType
            self.retryable_errors = [
                ErrorType.NETWORK_TIMEOUT,
                ErrorType.CONNECTION_ERROR,
                ErrorType.HTTP_SERVER_ERROR,
                ErrorType.RATE_LIMITED
            ]


@dataclass
class FetchConfig:
    """Configuration for downloading documents"""
    user_agent: str = None
    timeout: float = 30.0
    retry: RetryConfig = None

    def __post_init__(self):
        if self.user_agent is None:
            self.user_agent = f"domquery/{__version__}"
        if self.retry is None:
            self.retry = RetryConfig()
