# jira_connector/core/config.py

from dotenv import load_dotenv
import os

from jira_connector.core.models import ClientConfig

load_dotenv()

REQUIRED_VARS = ("JIRA_HOST_URL", "JIRA_USERNAME", "JIRA_API_TOKEN")


def get_jira_config() -> ClientConfig:
    """
    Construit la configuration du client depuis l'environnement (et le .env).
    Lève RuntimeError si une variable obligatoire manque.
    """
    missing = [name for name in REQUIRED_VARS if not os.getenv(name)]
    if missing:
        raise RuntimeError(f"Variables d'environnement manquantes : {', '.join(missing)}.")

    return ClientConfig(
        host_url=os.environ["JIRA_HOST_URL"],
        username=os.environ["JIRA_USERNAME"],
        api_token=os.environ["JIRA_API_TOKEN"],
        timeout=float(os.getenv("JIRA_TIMEOUT", "10")),
        max_retries=int(os.getenv("JIRA_MAX_RETRIES", "3")),
    )
