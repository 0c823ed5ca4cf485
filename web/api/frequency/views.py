"""Frequency API views - thin layer over the service."""

from pydantic import ValidationError as SchemaError

from app.container import container
from app.errors import ValidationError
from app.models.frequency import Estimate, FrequencyRequest, FrequencyResult, ProbeResult
from web.api.errors import error_payload

from .schemas import EstimateResponse, FrequencyRequestSchema, FrequencyResponse, ProbeResponse


def parse_request(payload: dict) -> FrequencyRequest:
    """Parse a camelCase request body."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        schema = FrequencyRequestSchema.model_validate(payload)
    except SchemaError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first["loc"])
        raise ValidationError(f"Invalid request field {field}: {first['msg']}") from None
    return FrequencyRequest(**schema.model_dump())


def to_response(result: FrequencyResult | Estimate | ProbeResult) -> dict:
    """Serialize a service result into its wire schema."""
    if isinstance(result, Estimate):
        schema = EstimateResponse.model_validate(result.to_dict())
    elif isinstance(result, ProbeResult):
        schema = ProbeResponse.model_validate(result.to_dict())
    else:
        schema = FrequencyResponse.model_validate(result.to_dict())
    return schema.model_dump(by_alias=True)


async def post_frequency(payload: dict) -> tuple[int, dict]:
    """Handle a frequency request body. Returns ``(status, body)``."""
    container.init()
    try:
        request = parse_request(payload)
        result = await container.frequency.handle(request)
    except Exception as e:
        return error_payload(e)
    return 200, to_response(result)
