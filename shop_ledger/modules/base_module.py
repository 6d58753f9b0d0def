from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QWidget

class BaseModule(QObject):
    # emitted after the module changed ledger data; the main window re-pulls every module
    data_changed = Signal()

    def get_widget(self) -> QWidget:
        raise NotImplementedError

    def refresh(self) -> None:
        raise NotImplementedError
