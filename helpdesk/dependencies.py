from fastapi import Depends
from sqlalchemy.orm import Session

from helpdesk.config import settings
from helpdesk.database import get_db
from helpdesk.services.conversation_router import ConversationRouter
from helpdesk.services.identity_service import ClerkIdentityProvider, IdentityProvider
from helpdesk.services.llm import GeminiProvider, LLMProvider
from helpdesk.services.mailer_service import Notifier, SmtpMailer
from helpdesk.services.store import ConversationStore, SqlConversationStore

# Global provider instances
_llm_provider = None
_identity_provider = None
_notifier = None


def get_store(db: Session = Depends(get_db)) -> ConversationStore:
    return SqlConversationStore(db)


def get_llm_provider() -> LLMProvider:
    """Get or create LLM provider instance."""
    global _llm_provider
    if _llm_provider is None:
        _llm_provider = GeminiProvider(
            api_key=settings.gemini_api_key,
            default_model=settings.gemini_model,
            timeout_seconds=settings.llm_timeout_seconds,
        )
    return _llm_provider


def get_identity_provider() -> IdentityProvider:
    global _identity_provider
    if _identity_provider is None:
        _identity_provider = ClerkIdentityProvider(settings.clerk_secret_key, api_url=settings.clerk_api_url)
    return _identity_provider


def get_notifier() -> Notifier:
    global _notifier
    if _notifier is None:
        _notifier = SmtpMailer(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            from_email=settings.mail_from,
        )
    return _notifier


def get_conversation_router(
    store: ConversationStore = Depends(get_store),
    llm: LLMProvider = Depends(get_llm_provider),
    identity: IdentityProvider = Depends(get_identity_provider),
    notifier: Notifier = Depends(get_notifier),
) -> ConversationRouter:
    return ConversationRouter(
        store=store,
        llm=llm,
        identity=identity,
        notifier=notifier,
        model=settings.gemini_model,
        portal_base_url=settings.portal_base_url,
    )
