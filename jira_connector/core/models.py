from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from jira_connector.core.utils import QueryValue

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


# --- Configuration du client ---

class ClientConfig(BaseModel):
    """Configuration de connexion à Jira Cloud (immuable une fois construite)."""
    host_url: str       = Field(..., min_length=1, description="URL de l'instance, ex: https://example.atlassian.net")
    username: str       = Field(..., description="Email du compte Atlassian.")
    api_token: str      = Field(..., description="Token d'API Atlassian.")
    timeout: float      = Field(10.0, gt=0, description="Timeout d'une requête, en secondes.")
    max_retries: int    = Field(3, ge=0, description="Accepté mais non utilisé par le client.")

    model_config = ConfigDict(frozen=True)


# --- Options d'une requête ---

class RequestOptions(BaseModel):
    """
    Paramètres nommés d'un appel à send_request.
    Une valeur None dans query_params signifie "paramètre absent".
    """
    endpoint: str                                       = Field(..., description="Chemin relatif à /rest/api/3")
    method: HttpMethod                                  = "GET"
    query_params: Optional[Dict[str, QueryValue]]       = None
    headers: Optional[Dict[str, str]]                   = None
    body: Any                                           = None
