"""HTTP route definitions for the service."""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Header, Query, status
from fastapi.responses import JSONResponse

from app.schemas import (
    AlertResponse,
    DeviceReadingRequest,
    FirmwareValidationResponse,
    ProblemDetails,
)
from models.readings import Alert, AlertKind
from services.alerts import AlertService, build_default_alert_service
from services.device_secrets import DeviceSecretValidator, build_default_secret_validator
from services.firmware import is_valid_firmware_version

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"

router = APIRouter()


def get_alert_service() -> AlertService:
    return build_default_alert_service()


def get_secret_validator() -> DeviceSecretValidator:
    return build_default_secret_validator()


def _problem_response(problem: ProblemDetails) -> JSONResponse:
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
    )


def _unauthorized() -> JSONResponse:
    return _problem_response(
        ProblemDetails(
            title="Unauthorized",
            status=status.HTTP_401_UNAUTHORIZED,
            detail="Device secret is not within the valid range.",
        )
    )


def _bad_firmware(alert: Alert) -> JSONResponse:
    return _problem_response(
        ProblemDetails(
            title="One or more validation errors occurred.",
            status=status.HTTP_400_BAD_REQUEST,
            errors={"FirmwareVersion": [alert.message]},
        )
    )


@router.post(
    "/readings/evaluate",
    response_model=List[AlertResponse],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ProblemDetails},
        status.HTTP_401_UNAUTHORIZED: {"model": ProblemDetails},
    },
    summary="Evaluate a device reading and return the alerts it raises.",
)
async def evaluate_reading(
    payload: DeviceReadingRequest,
    device_secret: Optional[str] = Header(
        None,
        alias="x-device-shared-secret",
        description="Shared secret identifying the device.",
    ),
    alert_service: AlertService = Depends(get_alert_service),
    secret_validator: DeviceSecretValidator = Depends(get_secret_validator),
) -> Union[List[AlertResponse], JSONResponse]:
    """Older devices request a firmware update when they receive the firmware validation error."""
    if not secret_validator.validate(device_secret):
        logger.warning(
            "Rejected reading with unknown device secret",
            extra={"status": status.HTTP_401_UNAUTHORIZED, "reason": "invalid device secret"},
        )
        return _unauthorized()

    alerts = alert_service.evaluate(payload.to_reading())

    firmware_alert = AlertService.first_of_kind(alerts, AlertKind.firmware_invalid)
    if firmware_alert is not None:
        logger.info(
            "Rejected reading with invalid firmware version",
            extra={
                "status": status.HTTP_400_BAD_REQUEST,
                "firmware_version": payload.firmware_version,
            },
        )
        return _bad_firmware(firmware_alert)

    return [AlertResponse.from_alert(alert) for alert in alerts]


@router.get(
    "/firmware/validate",
    response_model=FirmwareValidationResponse,
    summary="Check whether a firmware version string follows semantic versioning.",
)
async def validate_firmware(
    version: str = Query(..., description="Firmware version string to check."),
) -> FirmwareValidationResponse:
    return FirmwareValidationResponse(version=version, valid=is_valid_firmware_version(version))


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
