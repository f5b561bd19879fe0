from .builtin import builtin_catalog
from .catalog import Catalog, catalog_from_dict, load_catalog

__all__ = [
    "Catalog",
    "builtin_catalog",
    "catalog_from_dict",
    "load_catalog",
]
