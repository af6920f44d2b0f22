"""Decode SAM Entity API payloads into the Entity schema."""

import logging
from typing import Union

from pydantic import ValidationError

from .exceptions import ParseError
from .models import Entity, EntityResponse

logger = logging.getLogger(__name__)


def parse_response(data: Union[bytes, bytearray, str]) -> EntityResponse:
    """Parse a raw Entity API response body.

    Keys the schema does not declare are ignored. Declared keys that are
    absent or null keep their zero value. Values are not checked beyond
    their JSON type.

    Args:
        data: One JSON object as returned by the Entity API.

    Returns:
        The parsed response, entities in payload order.

    Raises:
        ParseError: If the payload is not valid JSON, is not an object, or
            has a declared field of the wrong type.
    """
    try:
        response = EntityResponse.model_validate_json(data)
    except ValidationError as e:
        logger.debug(f"Entity API payload rejected: {e.error_count()} error(s)")
        raise ParseError(f"Invalid SAM Entity API response: {e}") from e

    logger.debug(
        f"Parsed {len(response.entity_data)} entities "
        f"(totalRecords={response.total_records})"
    )
    return response


def parse_entity(data: Union[bytes, bytearray, str]) -> Entity:
    """Parse a single entity object, such as one element of ``entityData``.

    Follows the same rules as :func:`parse_response`.

    Raises:
        ParseError: If the payload is not valid JSON, is not an object, or
            has a declared field of the wrong type.
    """
    try:
        entity = Entity.model_validate_json(data)
    except ValidationError as e:
        logger.debug(f"Entity payload rejected: {e.error_count()} error(s)")
        raise ParseError(f"Invalid SAM entity: {e}") from e

    logger.debug(f"Parsed entity ueiSAM={entity.entity_registration.uei_sam!r}")
    return entity


def dump_response(response: EntityResponse) -> bytes:
    """Encode a response back to JSON using the upstream field names.

    Only declared fields are written; keys ignored at parse time are lost.
    """
    return response.model_dump_json(by_alias=True).encode("utf-8")
