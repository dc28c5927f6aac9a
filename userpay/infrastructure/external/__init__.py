from .user_local_adapter import UserRepositoryLocalAdapter
from .user_http_adapter import UserRepositoryHttpAdapter

__all__ = ["UserRepositoryLocalAdapter", "UserRepositoryHttpAdapter"]
