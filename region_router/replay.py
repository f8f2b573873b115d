"""Turn failed queries into responses, replaying misrouted writes in the primary region"""
import logging
from typing import Callable, Union

from fastapi.responses import PlainTextResponse

from region_router.errors import FailureKind, classify_error
from region_router.models import RoutingConfig

logger = logging.getLogger(__name__)

REPLAY_HEADER = "fly-replay"

Classifier = Callable[[Union[BaseException, str]], FailureKind]

def intercept_failure(
    error: Union[BaseException, str],
    routing: RoutingConfig,
    classifier: Classifier = classify_error,
) -> PlainTextResponse:
    """
    Build the response for a failed query.

    A write that landed on a read-only replica is not fatal: Fly replays the
    request in the region named by the fly-replay header. We never retry here.
    """
    if classifier(error) == FailureKind.REPLICA_WRITE:
        logger.info(
            "Replaying write to a read replica (from Fly region: %s) in the primary region: %s",
            routing.fly_region, routing.primary_region,
        )
        return PlainTextResponse(
            f"Replaying request in {routing.primary_region}",
            status_code=409,
            headers={REPLAY_HEADER: f"region={routing.primary_region}"},
        )

    if isinstance(error, BaseException):
        logger.error("Query failed: %s", error, exc_info=error)
    else:
        logger.error("Query failed: %s", error)
    return PlainTextResponse("Something went wrong", status_code=500)
