"""
Product module package exports.

- ProductController: product CRUD, restock and name search.
- ProductView / ProductForm / ProductsTableModel: the Qt pieces it drives.
"""

from .controller import ProductController
from .view import ProductView
from .form import ProductForm
from .model import ProductsTableModel

__all__ = [
    "ProductController",
    "ProductView",
    "ProductForm",
    "ProductsTableModel",
]
