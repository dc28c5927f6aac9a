"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    EMAIL = "email"
    NAME = "name"
    PASSWORD = "password"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    VERSION = "version"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
