# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .pagination import HistoryPagination

__all__ = ['custom_exception_handler', 'HistoryPagination']
