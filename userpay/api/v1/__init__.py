from .user_controller import router as user_router
from .payment_controller import router as payment_router


__all__ = ["user_router", "payment_router"]
