from .panels import Panels

__all__ = ['Panels']
