# Document Store
"""
Access to the Firestore collections backing interviews and feedback.

A single AsyncClient is created lazily per process and shared by all
request handlers.
"""

import logging
from threading import Lock
from typing import Any, Optional

from google.cloud import firestore

from interview_feedback.config import FIRESTORE_CONFIG

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Process-wide holder for the Firestore AsyncClient.

    Provides:
    - Lazy client creation from configuration
    - Collection references by logical name
    - Client injection for tests
    """

    _instance: Optional['DocumentStore'] = None
    _lock = Lock()

    def __new__(cls):
        """Singleton pattern for the document store."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._client: Any = None
        self._client_lock = Lock()
        self._initialized = True
        logger.info("DocumentStore initialized")

    @property
    def client(self) -> Any:
        """The Firestore AsyncClient, created on first use."""
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    self._client = firestore.AsyncClient(
                        project=FIRESTORE_CONFIG["project"],
                        database=FIRESTORE_CONFIG["database"],
                    )
                    logger.info(
                        f"🔌 Firestore client created (project={self._client.project}, "
                        f"database={FIRESTORE_CONFIG['database']})"
                    )
        return self._client

    def use_client(self, client: Any) -> None:
        """Replace the client (tests, emulator setups)."""
        with self._client_lock:
            self._client = client

    def interviews(self):
        """Reference to the interviews collection."""
        return self.client.collection(FIRESTORE_CONFIG["interviews_collection"])

    def feedback(self):
        """Reference to the feedback collection."""
        return self.client.collection(FIRESTORE_CONFIG["feedback_collection"])


# Global document store instance
document_store = DocumentStore()
