import asyncio
import random
import logging
from enum import Enum
from typing import Callable, Optional, Any
import aiohttp
from .config import RetryConfig

logger = logging.getLogger(__name__)


class ErrorType(Enum):
    """Classification of different error types"""
    PARSE_ERROR = "parse_error"
    RENDER_ERROR = "render_error"
    NETWORK_TIMEOUT = "network_timeout"
    CONNECTION_ERROR = "connection_error"
    HTTP_CLIENT_ERROR = "http_client_error"  # 4xx
    HTTP_SERVER_ERROR = "http_server_error"  # 5xx
    RATE_LIMITED = "rate_limited"  # 429
    UNKNOWN_ERROR = "unknown_error"


class DOMError(Exception):
    """Base class for every error raised by domquery"""
    error_type = ErrorType.UNKNOWN_ERROR


class ParseError(DOMError):
    """The parser collaborator could not build a tree from the markup"""
    error_type = ErrorType.PARSE_ERROR


class RenderError(DOMError):
    """The renderer collaborator could not serialize a node"""
    error_type = ErrorType.RENDER_ERROR


class FetchError(DOMError):
    """A document could not be downloaded"""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status_code = status_code
        self.error_type = ErrorHandler.classify_error(self, status_code)


class ErrorHandler:
    """Retries transient fetch failures with exponential backoff"""

    def __init__(self, retry_config: RetryConfig = None):
        self.retry_config = retry_config or RetryConfig()

    @staticmethod
    def classify_error(error: Exception, status_code: Optional[int] = None) -> ErrorType:
        """Classify an error into appropriate error type"""
        if isinstance(error, asyncio.TimeoutError):
            return ErrorType.NETWORK_TIMEOUT
        elif isinstance(error, aiohttp.ClientConnectionError):
            return ErrorType.CONNECTION_ERROR
        elif status_code:
            if status_code == 429:
                return ErrorType.RATE_LIMITED
            elif 400 <= status_code < 500:
                return ErrorType.HTTP_CLIENT_ERROR
            elif 500 <= status_code < 600:
                return ErrorType.HTTP_SERVER_ERROR
        elif isinstance(error, DOMError) and not isinstance(error, FetchError):
            return error.error_type

        return ErrorType.UNKNOWN_ERROR

    def is_retryable(self, error_type: ErrorType, attempt: int) -> bool:
        """Determine if an error should be retried"""
        if attempt >= self.retry_config.max_attempts:
            return False

        return error_type in self.retry_config.retryable_errors

    def calculate_delay(self, attempt: int, error_type: ErrorType) -> float:
        """Calculate delay before retry using exponential backoff with jitter"""
        delay = self.retry_config.base_delay * (
            self.retry_config.exponential_base ** (attempt - 1)
        )

        if error_type == ErrorType.RATE_LIMITED:
            delay *= 2

        delay = min(delay, self.retry_config.max_delay)

        if self.retry_config.jitter:
            delay += delay * 0.1 * random.random()

        return delay

    async def execute_with_retry(self, func: Callable, url: str, *args, **kwargs) -> Any:
        """Await func(*args, **kwargs), retrying transient failures"""
        for attempt in range(1, self.retry_config.max_attempts + 1):
            try:
                return await func(*args, **kwargs)
            except Exception as error:
                status_code = getattr(error, 'status_code', None)
                error_type = self.classify_error(error, status_code)

                log_level = logging.WARNING if attempt < self.retry_config.max_attempts else logging.ERROR
                logger.log(
                    log_level,
                    f"Attempt {attempt}/{self.retry_config.max_attempts} failed for {url}: "
                    f"{error_type.value} - {error}"
                )

                if not self.is_retryable(error_type, attempt):
                    raise

                delay = self.calculate_delay(attempt, error_type)
                logger.info(f"Retrying {url} in {delay:.1f}s (attempt {attempt + 1})")
                await asyncio.sleep(delay)
