# render/__init__.py

from .engine import TemplateRenderer
from .resolver import ArgumentResolver
from .strategies import DefaultValueFormatter, ValueFormatter

__all__ = ['ArgumentResolver', 'DefaultValueFormatter', 'TemplateRenderer', 'ValueFormatter']
