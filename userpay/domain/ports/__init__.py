from .external_user_port import ExternalUserData, ExternalUserPort

__all__ = ["ExternalUserData", "ExternalUserPort"]
