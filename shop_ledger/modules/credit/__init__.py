from .controller import CreditController
from .view import CreditView
from .model import CreditAccountsModel
from .payment_form import CustomerPaymentForm

__all__ = [
    "CreditController",
    "CreditView",
    "CreditAccountsModel",
    "CustomerPaymentForm",
]
