import base64
from typing import Union
from urllib.parse import quote_plus

# --- Fonctions utilitaires d'authentification et d'encodage ---

QueryValue = Union[str, int, float, bool, None]


def build_basic_auth(username: str, api_token: str) -> str:
    """
    Construit la valeur du header Authorization pour Jira Cloud.
    Retourne 'Basic <base64(username:api_token)>'.
    """
    token = base64.b64encode(f"{username}:{api_token}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def format_query_value(value: QueryValue) -> str:
    # bool avant int : True est aussi un int
    if isinstance(value, bool):
        return "true" if value else "false"
    # 1.0 -> '1', 1e21 -> '1e+21'
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def form_quote(value: str) -> str:
    """
    Encodage application/x-www-form-urlencoded :
    espace -> '+', seuls les alphanumériques ASCII et '*-._' restent en clair.
    Les surrogates isolés sont remplacés par U+FFFD avant l'encodage UTF-8.
    """
    value = value.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    # quote_plus laisse toujours '~' en clair
    return quote_plus(value, safe="*").replace("~", "%7E")
