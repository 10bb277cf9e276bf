# jira_connector/core/exceptions.py
from typing import Any, Dict, List, Optional


class JiraError(Exception):
    """Erreur levée par le client Jira (base commune des trois types)."""

    def __init__(
            self,
            message: str,
            status_code: Optional[int] = None,
            error_messages: Optional[List[str]] = None,
            errors: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_messages = list(error_messages or [])
        self.errors = dict(errors or {})


class NetworkError(JiraError):
    """Le transport n'a pas pu aboutir (DNS, connexion, timeout, abandon)."""
    pass


class AuthenticationError(JiraError):
    """Identifiants refusés par le serveur (401 / 403)."""
    pass


class APIError(JiraError):
    """Tout autre statut HTTP en échec, ou réponse de l'API inexploitable."""
    pass
