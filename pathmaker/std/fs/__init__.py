from .basic_fs import BasicFS

__all__ = ['BasicFS']
