"""
Token stores that hold OAuth tokens per user identity.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from brainstormai.models.event import AuthTokens
from brainstormai.utils.logger import logger
from brainstormai.utils.mongodb_client import MongoDBClient

class TokenStore(ABC):
    """Lookup of OAuth tokens by user id."""

    @abstractmethod
    def get_tokens(self, user_id: str) -> Optional[AuthTokens]:
        """Return the tokens stored for the user, or None."""
        pass

    @abstractmethod
    def save_tokens(self, user_id: str, tokens: AuthTokens) -> None:
        """Store tokens for the user, replacing any previous ones."""
        pass

    @abstractmethod
    def delete_tokens(self, user_id: str) -> None:
        """Forget the tokens stored for the user."""
        pass

class InMemoryTokenStore(TokenStore):
    """Token store kept in the memory of one process, for development and tests."""

    def __init__(self):
        self._tokens: Dict[str, AuthTokens] = {}

    def get_tokens(self, user_id: str) -> Optional[AuthTokens]:
        return self._tokens.get(user_id)

    def save_tokens(self, user_id: str, tokens: AuthTokens) -> None:
        self._tokens[user_id] = tokens
        logger.info(f"Stored OAuth tokens for {user_id}")

    def delete_tokens(self, user_id: str) -> None:
        self._tokens.pop(user_id, None)

class MongoTokenStore(TokenStore):
    """Token store persisted in MongoDB."""

    def __init__(self, mongo_uri: Optional[str] = None, db_name: Optional[str] = None):
        """
        Initialize the MongoDB token store.

        Args:
            mongo_uri: MongoDB connection string, defaults to the configured one
            db_name: Database name, defaults to the configured one
        """
        self.mongo_uri = mongo_uri
        self.db_name = db_name

    def get_tokens(self, user_id: str) -> Optional[AuthTokens]:
        with MongoDBClient(self.mongo_uri, self.db_name) as mongodb_client:
            doc = mongodb_client.fetch_tokens(user_id)
        if not doc:
            return None
        return AuthTokens(**doc)

    def save_tokens(self, user_id: str, tokens: AuthTokens) -> None:
        with MongoDBClient(self.mongo_uri, self.db_name) as mongodb_client:
            mongodb_client.upsert_tokens(user_id, tokens.model_dump(exclude_none=True))

    def delete_tokens(self, user_id: str) -> None:
        with MongoDBClient(self.mongo_uri, self.db_name) as mongodb_client:
            mongodb_client.delete_tokens(user_id)
