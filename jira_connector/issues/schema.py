from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Dict, List, Optional


# --- Paramètres de recherche ---

class SearchIssuesOptions(BaseModel):
    """Paramètres d'une recherche JQL"""
    jql: str                            = Field(..., min_length=1, description="Requête JQL, ex: 'project = TEST'")
    max_results: int                    = Field(50, ge=1, description="Nombre maximum d'issues par page.")
    start_at: int                       = Field(0, ge=0, description="Index de la première issue.")
    fields: List[str]                   = Field(default_factory=list, description="Champs à retourner (tous si vide).")
    next_page_token: Optional[str]      = Field(None, description="Jeton de page renvoyé par la recherche précédente.")


# --- Réponse de recherche ---

class SearchIssuesResponse(BaseModel):
    """
    Réponse de GET /search/jql.
    Les issues restent des dicts bruts : leur contenu dépend des 'fields' demandés.
    """
    issues: List[Dict[str, Any]]        = Field(default_factory=list)
    total: Optional[int]                = None
    start_at: Optional[int]             = Field(None, alias="startAt")
    max_results: Optional[int]          = Field(None, alias="maxResults")
    next_page_token: Optional[str]      = Field(None, alias="nextPageToken")
    is_last: Optional[bool]             = Field(None, alias="isLast")

    model_config = ConfigDict(populate_by_name=True, extra="allow")
