"""
Utility modules for the catalog browser
"""
from .config_loader import ApiConfig, AudioConfig, CatalogConfig, load_catalog_config

__all__ = [
    'ApiConfig',
    'AudioConfig',
    'CatalogConfig',
    'load_catalog_config',
]
