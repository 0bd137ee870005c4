from nuber_identity.application.context.account_context import AccountContext
from nuber_identity.application.context.authenticator import AccountAuthenticator

__all__ = ["AccountAuthenticator", "AccountContext"]
