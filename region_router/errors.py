"""Error types and classification of database failures"""
from enum import Enum
from typing import Union

from pymysql.err import MySQLError

# Vitess rejects writes on a replica with e.g.
# "supported only for primary tablet type, current type: rdonly"
READ_ONLY_MARKER = "current type: rdonly"

class RoutingError(Exception):
    """Base class for errors raised by region_router"""

class ConfigurationError(RoutingError):
    """Startup configuration is unusable; the app must not start"""

class FailureKind(str, Enum):
    REPLICA_WRITE = "replica_write"
    UNCLASSIFIED = "unclassified"

def error_message(error: Union[BaseException, str]) -> str:
    """Message text of a failed query. MySQL driver errors carry (code, message) args."""
    if isinstance(error, str):
        return error
    if isinstance(error, MySQLError) and len(error.args) >= 2 and isinstance(error.args[1], str):
        return error.args[1]
    return str(error)

def classify_error(error: Union[BaseException, str]) -> FailureKind:
    """Was this a write sent to a read-only replica?"""
    if READ_ONLY_MARKER in error_message(error):
        return FailureKind.REPLICA_WRITE
    return FailureKind.UNCLASSIFIED
