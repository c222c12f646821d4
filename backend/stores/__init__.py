from stores.credentials import CredentialVerifier, PlaintextVerifier
from stores.recipes import RecipeStore
from stores.sessions import SessionStore

__all__ = ["CredentialVerifier", "PlaintextVerifier", "RecipeStore", "SessionStore"]
