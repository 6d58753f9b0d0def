"""
Domain errors raised by the repositories.

Every business-rule failure is detected before anything is mutated, so
catching one of these always means "nothing changed". Controllers surface
them as dialogs; NotFoundError is the exception: it means the UI held a
stale id and is handled as a silent reload.
"""


class DomainError(Exception):
    """Domain-level error the controller/UI can surface (toast/snackbar)."""
    pass


class NoProductSelectedError(DomainError):
    def __init__(self, message: str = "Please select a valid product."):
        super().__init__(message)


class InvalidPriceError(DomainError):
    def __init__(self, message: str = "Selling price cannot be at or below cost price."):
        super().__init__(message)


class InsufficientStockError(DomainError):
    def __init__(self, message: str = "Not enough stock available."):
        super().__init__(message)


class MissingCustomerError(DomainError):
    def __init__(self, message: str = "Customer name is required for credit sales."):
        super().__init__(message)


class InvalidAmountError(DomainError):
    pass


class NotFoundError(DomainError):
    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} '{record_id}' not found.")
        self.kind = kind
        self.record_id = record_id
