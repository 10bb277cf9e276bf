# jira_connector/issues/repository.py

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from jira_connector.core.http_client import JiraHttpClient
from jira_connector.core.logger import get_logger
from jira_connector.core.models import RequestOptions
from jira_connector.issues.schema import SearchIssuesOptions, SearchIssuesResponse

logger = get_logger(__name__)


class IssueSearchRepository:
    """Recherche d'issues via GET /search/jql."""

    def __init__(self, client: JiraHttpClient):
        self.client = client

    async def search_issues(self, options: SearchIssuesOptions) -> SearchIssuesResponse:
        """
        Lance la recherche JQL et valide la réponse.
        Les erreurs du client (NetworkError, AuthenticationError, APIError) sont propagées telles quelles.
        """
        logger.debug("Recherche JQL : %s (startAt=%s, maxResults=%s)", options.jql, options.start_at, options.max_results)

        data = await self.client.send_request(RequestOptions(
            endpoint="search/jql",
            method="GET",
            query_params={
                "jql": options.jql,
                "maxResults": options.max_results,
                "startAt": options.start_at,
                "fields": ",".join(options.fields) if options.fields else None,
                "nextPageToken": options.next_page_token,
            },
        ))

        try:
            return SearchIssuesResponse.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Réponse de recherche Jira invalide : {e}") from e


class IssueRepository:
    """Lecture d'une issue via GET /issue/{key}."""

    def __init__(self, client: JiraHttpClient):
        self.client = client

    async def get_issue(self, issue_key: str, fields: Optional[List[str]] = None,
                        expand: Optional[List[str]] = None) -> Dict[str, Any]:
        issue_key = (issue_key or "").strip()
        if not issue_key:
            raise ValueError("Une clé d'issue est requise (ex: 'TEST-123').")

        logger.debug("GET issue | key=%s", issue_key)
        return await self.client.send_request(RequestOptions(
            endpoint=f"issue/{issue_key}",
            method="GET",
            query_params={
                "fields": ",".join(fields) if fields else None,
                "expand": ",".join(expand) if expand else None,
            },
        ))
