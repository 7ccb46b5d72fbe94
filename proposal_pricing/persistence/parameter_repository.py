"""
Parameter Repository — per-user pricing customisations stored in MongoDB.

One document per user in the `pricing_parameters` collection, holding only
the fields the user has customised. Reads fall back to the system defaults
if MongoDB is unavailable; writes fail loudly.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from proposal_pricing.config import get_settings
from proposal_pricing.exceptions import StorageError
from proposal_pricing.pricing.parameters import PricingOverrides, PricingParameters, resolve

logger = logging.getLogger(__name__)


class ParameterRepository:
    """
    Loads / saves PricingOverrides keyed by user id.
    The collection handle can be injected; otherwise it is opened lazily.
    """

    def __init__(self, collection: Any = None):
        self.settings = get_settings()
        self._collection = collection

    def _get_collection(self) -> Any:
        if self._collection is not None:
            return self._collection
        client: MongoClient = MongoClient(self.settings.mongodb_uri, serverSelectionTimeoutMS=2000)
        self._collection = client[self.settings.mongodb_database][self.settings.parameters_collection]
        logger.info(
            f"Using MongoDB collection {self.settings.mongodb_database}."
            f"{self.settings.parameters_collection}"
        )
        return self._collection

    def get_overrides(self, user_id: str) -> Optional[PricingOverrides]:
        """Return the user's customisations, or None if there are none (or the store is down)."""
        try:
            doc = self._get_collection().find_one({"user_id": user_id})
        except PyMongoError as e:
            logger.warning(f"MongoDB not available, using default pricing parameters: {e}")
            return None

        if not doc:
            return None
        return PricingOverrides.model_validate(doc)

    def save_overrides(self, user_id: str, overrides: PricingOverrides) -> None:
        """Replace the user's customisations with `overrides`."""
        document = {"user_id": user_id, **overrides.model_dump(exclude_none=True)}
        try:
            self._get_collection().replace_one({"user_id": user_id}, document, upsert=True)
        except PyMongoError as e:
            logger.error(f"Failed saving pricing parameters for {user_id}: {e}")
            raise StorageError(f"Could not save pricing parameters for {user_id}") from e
        logger.info(f"Saved pricing parameters for {user_id}: {sorted(document)}")

    def reset(self, user_id: str) -> bool:
        """Drop the user's customisations. Returns True if something was deleted."""
        try:
            result = self._get_collection().delete_one({"user_id": user_id})
        except PyMongoError as e:
            logger.error(f"Failed resetting pricing parameters for {user_id}: {e}")
            raise StorageError(f"Could not reset pricing parameters for {user_id}") from e
        deleted = result.deleted_count > 0
        logger.info(f"Reset pricing parameters for {user_id} (deleted={deleted})")
        return deleted

    def resolve_for(self, user_id: Optional[str]) -> PricingParameters:
        """Effective parameters for a user: their overrides over the defaults."""
        if not user_id:
            return resolve(None)
        return resolve(self.get_overrides(user_id))
