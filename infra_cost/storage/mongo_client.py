# ==============================================
# MongoClient
# ==============================================
#
# PURPOSE:
#   Manages the MongoDB connection and hands out collection handles.
#   Holds the connection explicitly (no module-level globals) so its
#   lifetime is bounded by a `with` block.
#
# CLASS: MongoClient
# ------------------
#   Stateful — holds connection to MongoDB.
#
#   Constructor:
#   ------------
#   - __init__(host, port, database, user=None, password=None)
#
#   Methods:
#   --------
#   - connect() -> None
#       Establish connection to MongoDB and ping it (no-op if already connected).
#       Raises StoreConnectionError on failure, including bad URI settings.
#
#   - disconnect() / close() -> None
#       Close connection. No-op when not connected.
#
#   - get_collection(collection_name: str) -> Collection
#       Return a pymongo collection handle.
#
#   - ensure_indexes(collection_name: str) -> None
#       Create unique index on resourceId.
#
#   - reset_collection(collection_name: str) -> Collection
#       Drop the collection, recreate indexes, return the handle.
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MongoClient(...) as store:` usage.
#     The connection is closed even if the body raises.
#
# ==============================================

from urllib.parse import quote_plus

from pymongo import MongoClient as PyMongoClient
from pymongo.collection import Collection
from pymongo.errors import ConfigurationError, ConnectionFailure, OperationFailure

from infra_cost.exceptions import StoreConnectionError

# Field carrying the resource identity in stored documents
RESOURCE_KEY_FIELD = "resourceId"


class MongoClient:
    def __init__(self, host, port, database, user=None, password=None):
        # Store connection params. Don't connect yet.
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self.client = None  # Will hold the actual MongoDB client connection

    @classmethod
    def from_config(cls, mongo_config) -> "MongoClient":
        """Build an unconnected client from a MongoConfig."""
        return cls(
            host=mongo_config.host,
            port=mongo_config.port,
            database=mongo_config.database,
            user=mongo_config.user,
            password=mongo_config.password
        )

    @property
    def uri(self) -> str:
        if self.user and self.password:
            # Credentials must be RFC 3986 escaped
            user = quote_plus(self.user)
            password = quote_plus(self.password)
            return f"mongodb://{user}:{password}@{self.host}:{self.port}/{self.database}"
        return f"mongodb://{self.host}:{self.port}/{self.database}"

    @property
    def is_connected(self) -> bool:
        return self.client is not None

    def connect(self):
        # Establish connection to MongoDB. Reuses an open connection.
        if self.client is not None:
            return

        client = None
        try:
            client = PyMongoClient(self.uri)
            # Test connection
            client.admin.command('ping')
        except ConfigurationError as e:
            print(f"✗ Invalid MongoDB configuration: {e}")
            self._discard(client)
            raise StoreConnectionError("Invalid MongoDB connection settings", str(e)) from e
        except ConnectionFailure as e:
            print(f"✗ Could not connect to MongoDB at {self.host}:{self.port}: {e}")
            self._discard(client)
            raise StoreConnectionError(
                f"Could not connect to MongoDB at {self.host}:{self.port}", str(e)
            ) from e
        except OperationFailure as e:
            print(f"✗ Authentication failed: {e}")
            self._discard(client)
            raise StoreConnectionError("MongoDB authentication failed", str(e)) from e
        
        self.client = client
        print(f"✓ Connected to MongoDB (database '{self.database}').")

    @staticmethod
    def _discard(client):
        if client is not None:
            client.close()

    def disconnect(self):
        # Close connection.
        if self.client:
            self.client.close()
            print("✓ MongoDB connection closed.")
            self.client = None

    close = disconnect

    def get_collection(self, collection_name) -> Collection:
        if not self.client:
            raise StoreConnectionError("Not connected to MongoDB.")
        return self.client[self.database][collection_name]

    def ensure_indexes(self, collection_name):
        # resourceId must be unique within the collection
        collection = self.get_collection(collection_name)
        collection.create_index(RESOURCE_KEY_FIELD, unique=True)

    def reset_collection(self, collection_name) -> Collection:
        # Drop old data, then recreate indexes on the empty collection.
        collection = self.get_collection(collection_name)
        collection.drop()
        print(f"✓ Dropped collection '{collection_name}'.")
        self.ensure_indexes(collection_name)
        return collection

    def __enter__(self):
        # For `with MongoClient(...) as store:` usage.
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
