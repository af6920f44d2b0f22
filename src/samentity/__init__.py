"""samentity - typed models for the SAM Entity API.

Parses SAM Entity API (v2, schema 2.5) responses into immutable pydantic
models: registration, core data, assertions, reps and certs, and points of
contact.
"""

from .api import API, API_VERSION
from .config import settings
from .exceptions import ParseError, SamEntityError
from .models import (
    Address,
    Answer,
    Assertions,
    CoreData,
    DFARSResponse,
    Entity,
    EntityResponse,
    FARResponse,
    PointOfContact,
    PointsOfContact,
    Registration,
    RepsAndCerts,
)
from .parser import dump_response, parse_entity, parse_response

__all__ = [
    # Parsing
    "parse_response",
    "parse_entity",
    "dump_response",
    # Models
    "EntityResponse",
    "Entity",
    "Registration",
    "CoreData",
    "Assertions",
    "RepsAndCerts",
    "PointsOfContact",
    "Address",
    "PointOfContact",
    "FARResponse",
    "DFARSResponse",
    "Answer",
    # API
    "API",
    "API_VERSION",
    # Config
    "settings",
    # Exceptions
    "SamEntityError",
    "ParseError",
]

__version__ = "0.1.0"
