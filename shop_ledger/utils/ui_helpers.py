from PySide6.QtWidgets import QWidget, QMessageBox

from ..database.repositories.errors import (
    DomainError,
    InsufficientStockError,
    InvalidAmountError,
    InvalidPriceError,
    MissingCustomerError,
    NoProductSelectedError,
)


def info(parent: QWidget, title: str, text: str):
    QMessageBox.information(parent, title, text)

def confirm(parent: QWidget, title: str, text: str) -> bool:
    resp = QMessageBox.question(
        parent,
        title,
        text,
        QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
    )
    return resp == QMessageBox.StandardButton.Yes


def map_error(context: str, err: Exception) -> tuple[str, str]:
    """
    Convert exceptions to (title, message). Keeps messages consistent
    across controllers.
    """
    if isinstance(err, NoProductSelectedError):
        return "Select product", str(err)
    if isinstance(err, InvalidPriceError):
        return "Invalid price", str(err)
    if isinstance(err, InsufficientStockError):
        return "Insufficient stock", str(err)
    if isinstance(err, MissingCustomerError):
        return "Customer required", str(err)
    if isinstance(err, InvalidAmountError):
        return "Invalid amount", str(err)
    if isinstance(err, DomainError):
        return "Invalid data", str(err)
    # Fallback
    return "Error", f"{context}: {err}"
