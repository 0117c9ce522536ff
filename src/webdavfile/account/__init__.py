from .account_info import AccountInfo

__all__ = ["AccountInfo"]
