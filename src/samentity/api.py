"""SAM Entity API location and schema version.

Additional API details are published at https://open.gsa.gov/api/entity-api/

Query parameters, including ``api_key``, are the caller's to add, e.g.
``API.copy_merge_params({"api_key": key, "ueiSAM": uei})``.
"""

import httpx

from .config import settings

# Version of the SAM Entity API response schema these models describe.
# Informational only; responses are not checked against it.
API_VERSION = 2.5

API = httpx.URL(
    scheme=settings.SAM_ENTITY_API_SCHEME,
    host=settings.SAM_ENTITY_API_HOST,
    path="/" + settings.SAM_ENTITY_API_PATH.lstrip("/"),
)
