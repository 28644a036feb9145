from config import settings
from services.echo import EchoStore
from services.sessions import SessionRegistry
from services.submission import SubmissionClient

session_registry = SessionRegistry(max_sessions=settings.max_sessions)
echo_store = EchoStore(max_submissions=settings.echo_max_submissions)


def get_sessions() -> SessionRegistry:
    return session_registry


def get_echo_store() -> EchoStore:
    return echo_store


def get_submission_client() -> SubmissionClient:
    return SubmissionClient(settings.webhook_url, timeout=settings.submission_timeout)
