import json
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

import httpx

from .exceptions import APIError, AuthenticationError, JiraError, NetworkError
from .logger import get_logger, redact_headers
from .models import ClientConfig, RequestOptions
from .url_builder import JiraUrlBuilder
from .utils import build_basic_auth

logger = get_logger(__name__)

AUTH_FAILURE_STATUSES = (401, 403)


class Transport(Protocol):
    """Point d'injection de l'appel réseau (remplaçable dans les tests)."""

    async def send(self, method: str, url: str, *, headers: Dict[str, str],
                   content: Optional[bytes], timeout: float) -> httpx.Response:
        ...


class HttpxTransport:
    """Transport par défaut basé sur httpx.AsyncClient."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client if client is not None else httpx.AsyncClient()

    async def send(self, method: str, url: str, *, headers: Dict[str, str],
                   content: Optional[bytes], timeout: float) -> httpx.Response:
        return await self._client.request(method, url, headers=headers, content=content, timeout=timeout)

    async def aclose(self):
        await self._client.aclose()


class JiraHttpClient:
    """
    Client HTTP asynchrone pour l'API REST Jira Cloud.

    Chaque appel à send_request :
     - construit l'URL (JiraUrlBuilder),
     - ajoute l'authentification Basic,
     - envoie la requête via le transport injecté,
     - retourne le JSON décodé ou lève NetworkError / AuthenticationError / APIError.
    """

    def __init__(self, config: ClientConfig, transport: Optional[Transport] = None):
        self.config = config
        self._url_builder = JiraUrlBuilder(config.host_url)
        self._auth_header = build_basic_auth(config.username, config.api_token)
        # Transport (testable / injectable)
        self.transport = transport if transport is not None else HttpxTransport()

    @property
    def base_url(self) -> str:
        return self._url_builder.base_url

    async def send_request(self, options: RequestOptions) -> Any:
        url = self._url_builder.build_url(options.endpoint, options.query_params)
        headers = self._build_headers(options.headers)
        content = self._serialize_body(options.body)
        logger.debug(f"➡️ {options.method} {url} | headers={redact_headers(headers)}")

        try:
            response = await self.transport.send(
                options.method, url, headers=headers, content=content, timeout=self.config.timeout
            )
        except JiraError:
            # déjà typée plus bas dans la chaîne d'appel
            raise
        except Exception as e:
            logger.warning(f"Network error on {options.method} {url}: {e}")
            raise NetworkError(f"Network error while calling Jira: {e}") from e

        logger.debug(f"⬅️ Response {response.status_code} for {options.method} {url}")
        return self._handle_response(response, options.method, url)

    # ---------------- Construction de la requête ----------------
    def _build_headers(self, extra: Optional[Mapping[str, str]]) -> Dict[str, str]:
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        for key, value in (extra or {}).items():
            if key.lower() == "authorization":
                logger.warning("Ignoring caller-supplied Authorization header; credentials come from configuration.")
                continue
            # fusion insensible à la casse
            for existing in [k for k in headers if k.lower() == key.lower()]:
                del headers[existing]
            headers[key] = value
        headers["Authorization"] = self._auth_header
        return headers

    @staticmethod
    def _serialize_body(body: Any) -> Optional[bytes]:
        if body is None:
            return None
        return json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    # ---------------- Classification de la réponse ----------------
    def _handle_response(self, response: httpx.Response, method: str, url: str) -> Any:
        status = response.status_code

        if status in AUTH_FAILURE_STATUSES:
            messages, errors = self._parse_error_body(response)
            logger.error(f"Authentication error {status} on {method} {url}: {messages}")
            raise AuthenticationError(
                self._format_message("Jira authentication failed", status, messages, errors),
                status_code=status, error_messages=messages, errors=errors,
            )

        if not 200 <= status < 300:
            messages, errors = self._parse_error_body(response)
            logger.error(f"API Error {status} on {method} {url}: {messages}")
            raise APIError(
                self._format_message("Jira API error", status, messages, errors),
                status_code=status, error_messages=messages, errors=errors,
            )

        if status == 204:
            return {}

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON in response {status} on {method} {url}: {e}")
            raise APIError(f"Jira returned an invalid JSON body (HTTP {status})", status_code=status) from e

    @staticmethod
    def _parse_error_body(response: httpx.Response) -> Tuple[List[str], Dict[str, Any]]:
        """Extrait errorMessages / errors du corps d'erreur Jira ; vide si illisible."""
        try:
            payload = response.json()
        except ValueError:
            return [], {}
        if not isinstance(payload, dict):
            return [], {}

        messages = payload.get("errorMessages")
        errors = payload.get("errors")
        messages = [str(m) for m in messages] if isinstance(messages, list) else []
        errors = dict(errors) if isinstance(errors, dict) else {}
        return messages, errors

    @staticmethod
    def _format_message(prefix: str, status: int, messages: List[str], errors: Dict[str, Any]) -> str:
        details = messages + [f"{field}: {reason}" for field, reason in errors.items()]
        if not details:
            return f"{prefix} (HTTP {status})"
        return f"{prefix} (HTTP {status}): {'; '.join(details)}"

    # Support pour l'utilisation dans un bloc 'async with'
    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Fermeture propre du transport, s'il en expose une."""
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()
