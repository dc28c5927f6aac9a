"""Constants for Payment model field names"""


class PaymentFields:
    """Field name constants for Payment model"""
    ID = "id"
    USER_ID = "user_id"
    AMOUNT = "amount"
    CURRENCY = "currency"
    STATUS = "status"
    DESCRIPTION = "description"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
