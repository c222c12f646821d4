"""
Session store: registered accounts and the access tokens issued to them.

Tokens never expire; one is removed only by logout(). An account may hold
any number of live tokens at once.
"""

import logging
import threading
import uuid
from typing import Optional

from errors import Conflict, InvalidInput, Unauthorized
from models.account import Account
from models.session import Session
from stores.credentials import CredentialVerifier, PlaintextVerifier

logger = logging.getLogger(__name__)


def _mask(token: str) -> str:
    return token[:8] + "…"


class SessionStore:
    def __init__(self, verifier: Optional[CredentialVerifier] = None):
        self._verifier = verifier or PlaintextVerifier()
        self._accounts: dict[str, Account] = {}
        self._account_ids_by_email: dict[str, str] = {}
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def _issue_token(self, account: Account) -> str:
        # caller holds the lock
        token = str(uuid.uuid4())
        while token in self._sessions:
            token = str(uuid.uuid4())
        self._sessions[token] = Session(token=token, account_id=account.id)
        return token

    def register(self, email: Optional[str], secret: Optional[str]) -> tuple[Account, str]:
        """
        Create an account and log it in.

        Raises InvalidInput if either field is empty, Conflict if the email is
        already registered. Emails are compared exactly as given.
        """
        if not email or not secret:
            raise InvalidInput("Email and password are required")

        with self._lock:
            if email in self._account_ids_by_email:
                raise Conflict("Email is already registered")

            account = Account(
                id=str(uuid.uuid4()),
                email=email,
                password=self._verifier.encode(secret),
            )
            self._accounts[account.id] = account
            self._account_ids_by_email[email] = account.id
            token = self._issue_token(account)

        logger.info("Registered account %s", account.id)
        return account, token

    def login(self, email: Optional[str], secret: Optional[str]) -> tuple[Account, str]:
        """Issue a fresh token for matching credentials; earlier tokens stay valid."""
        with self._lock:
            account_id = self._account_ids_by_email.get(email) if email else None
            account = self._accounts.get(account_id) if account_id else None
            if account is None or not self._verifier.verify(secret or "", account.password):
                logger.warning("Failed login attempt")
                raise Unauthorized("Invalid login credentials")
            token = self._issue_token(account)

        logger.info("Account %s logged in", account.id)
        return account, token

    def logout(self, token: Optional[str]) -> None:
        """Drop the session for `token`. Unknown or missing tokens are ignored."""
        if not token:
            return
        with self._lock:
            session = self._sessions.pop(token, None)
        if session is not None:
            logger.info("Account %s logged out", session.account_id)

    def resolve(self, token: Optional[str]) -> Optional[Account]:
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            return self._accounts.get(session.account_id)

    def require_auth(self, token: Optional[str]) -> Account:
        """resolve(), but a missing or unknown token raises Unauthorized."""
        if not token:
            raise Unauthorized("Missing authorization header")
        account = self.resolve(token)
        if account is None:
            logger.warning("Rejected access token %s", _mask(token))
            raise Unauthorized("Invalid access token")
        return account
