# ==============================================
# STORAGE (MongoDB)
# ==============================================
#
# This package handles all database operations:
# connecting, resetting the collection, and inserting sample data.
#
# Modules:
# --------
# - mongo_client.py    → MongoDB connection and collection handles
# - sample_data.py     → The four fixed sample resources and their loader
#
# ==============================================

from .mongo_client import MongoClient, RESOURCE_KEY_FIELD
from .sample_data import SAMPLE_RESOURCES, insert_sample_data

__all__ = [
    "MongoClient",
    "RESOURCE_KEY_FIELD",
    "SAMPLE_RESOURCES",
    "insert_sample_data"
]
