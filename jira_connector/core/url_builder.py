from typing import Mapping, Optional

from jira_connector.core.utils import QueryValue, form_quote, format_query_value

API_PATH = "rest/api/3"


class JiraUrlBuilder:
    """
    Construit les URLs absolues de l'API REST Jira.

    L'URL de base (host + 'rest/api/3') est calculée une seule fois.
    Les séparateurs finaux du host sont conservés tels quels :
     - 'https://x.atlassian.net'     -> 'https://x.atlassian.net/rest/api/3'
     - 'https://x.atlassian.net/'    -> 'https://x.atlassian.net/rest/api/3'
     - 'https://x.atlassian.net///'  -> 'https://x.atlassian.net///rest/api/3'
    """

    def __init__(self, host_url: str):
        separator = "" if host_url.endswith("/") else "/"
        self._base_url = f"{host_url}{separator}{API_PATH}"

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_url(self, endpoint: str, query_params: Optional[Mapping[str, QueryValue]] = None) -> str:
        """
        Joint l'URL de base et l'endpoint par un seul '/', puis ajoute la query string.
        Un endpoint qui contient déjà '?' est repris tel quel.
        """
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        query = self.encode_query(query_params)
        if query:
            url = f"{url}?{query}"
        return url

    @staticmethod
    def encode_query(query_params: Optional[Mapping[str, QueryValue]]) -> str:
        # ordre d'insertion, les None sont omis
        if not query_params:
            return ""
        return "&".join(
            f"{form_quote(str(key))}={form_quote(format_query_value(value))}"
            for key, value in query_params.items()
            if value is not None
        )
