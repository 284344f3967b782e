"""Resolution endpoints."""

from __future__ import annotations

import asyncio
import time

from fastapi import APIRouter, Query

from ensresolve.api.dependencies import Orchestrator, Settings
from ensresolve.api.schemas import (
    APIError,
    ClassificationResponse,
    ProviderAttemptResponse,
    ResolveResponse,
    ValidationResponse,
)
from ensresolve.core.exceptions import InvalidFormatError, NotFoundError
from ensresolve.core.models import ClassifiedQuery
from ensresolve.detection import classify, is_valid
from ensresolve.mapping import destination_url

router = APIRouter(tags=["resolve"])

_ERROR_RESPONSES = {
    404: {"model": APIError, "description": "No provider returned a value"},
    422: {"model": APIError, "description": "Identifier could not be classified"},
}


def _classify_or_raise(identifier: str) -> ClassifiedQuery:
    """Classify a validated identifier, raising classification errors."""
    if not is_valid(identifier):
        raise InvalidFormatError(
            message=f"Not a recognized identifier format: {identifier!r}",
            identifier=identifier,
        )
    return classify(identifier)


def _convert_query_to_response(query: ClassifiedQuery) -> ClassificationResponse:
    """Convert domain ClassifiedQuery to API response."""
    return ClassificationResponse(
        identifier=query.identifier,
        base_label=query.base_label,
        request_kind=query.kind,
        symbol=query.symbol,
        is_l2_subdomain=query.is_l2_subdomain,
        l2_network=query.l2_network,
        eth_name=query.eth_name,
    )


@router.get(
    "/resolve/{identifier}",
    response_model=ResolveResponse,
    responses=_ERROR_RESPONSES,
    operation_id="resolveIdentifier",
    summary="Resolve identifier",
    description="Resolve a name to a chain address or text record and its destination URL.",
)
async def resolve_identifier(
    identifier: str,
    orchestrator: Orchestrator,
    settings: Settings,
    timeout: float | None = Query(
        None, gt=0, le=30, description="Overall time budget in seconds"
    ),
) -> ResolveResponse:
    """Resolve an identifier through the provider chain."""
    start_time = time.monotonic()
    query = _classify_or_raise(identifier)

    deadline = None
    if timeout is not None:
        deadline = asyncio.get_running_loop().time() + timeout

    outcome = await orchestrator.resolve_query(query, deadline=deadline)

    if not outcome.found:
        raise NotFoundError(
            message=f"No provider returned a value for {identifier}",
            details={"sourcesTried": [str(source) for source in outcome.sources_tried]},
        )

    total_duration = (time.monotonic() - start_time) * 1000

    return ResolveResponse(
        identifier=identifier,
        address=outcome.address,
        source_provider=outcome.source_provider,
        destination_url=destination_url(
            query,
            outcome.address,
            l2_detection_enabled=settings.l2_detection_enabled,
        ),
        classification=_convert_query_to_response(query),
        attempts=[
            ProviderAttemptResponse(
                source=attempt.source,
                status=attempt.status,
                duration_ms=attempt.duration_ms,
                error_message=attempt.error_message,
            )
            for attempt in outcome.attempts
        ],
        total_duration_ms=total_duration,
    )


@router.get(
    "/resolve/{identifier}/classify",
    response_model=ClassificationResponse,
    responses={422: _ERROR_RESPONSES[422]},
    operation_id="classifyIdentifier",
    summary="Classify identifier",
    description="Parse an identifier into base label, request kind and L2 network.",
)
async def classify_identifier(identifier: str) -> ClassificationResponse:
    """Classify an identifier without any network call."""
    return _convert_query_to_response(_classify_or_raise(identifier))


@router.get(
    "/validate/{identifier}",
    response_model=ValidationResponse,
    operation_id="validateIdentifier",
    summary="Validate identifier",
    description="Check whether an identifier matches a recognized format.",
)
async def validate_identifier(identifier: str) -> ValidationResponse:
    """Check identifier format."""
    return ValidationResponse(identifier=identifier, valid=is_valid(identifier))
