from datetime import datetime
from pymongo import MongoClient

from brainstormai.utils.config import config
from brainstormai.utils.logger import logger

class MongoDBClient:
    def __init__(self, mongo_uri=None, db_name=None):
        self.mongo_uri = mongo_uri or config.mongo_uri
        self.client = MongoClient(self.mongo_uri)

        self.db = self.client[db_name or config.mongo_db_name]
        self.oauth_tokens = self.db.oauth_tokens
        self.create_indexes()

    def create_indexes(self):
        """Create necessary indexes for collections."""
        # One token document per user
        self.oauth_tokens.create_index("user_id", unique=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def fetch_tokens(self, user_id):
        """Fetch the stored OAuth tokens for a user, without Mongo metadata."""
        doc = self.oauth_tokens.find_one({"user_id": user_id}, {"_id": 0, "user_id": 0, "updated_at": 0})
        return doc

    def upsert_tokens(self, user_id, tokens):
        """Insert or replace the OAuth tokens for a user."""
        doc = dict(tokens)
        doc["user_id"] = user_id
        doc["updated_at"] = datetime.utcnow()
        self.oauth_tokens.replace_one({"user_id": user_id}, doc, upsert=True)
        logger.info(f"Stored OAuth tokens for {user_id}")

    def delete_tokens(self, user_id):
        """Remove the OAuth tokens for a user."""
        result = self.oauth_tokens.delete_one({"user_id": user_id})
        logger.info(f"Deleted {result.deleted_count} token record(s) for {user_id}")

    def close(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()
