# core/signals.py
from PyQt5.QtCore import QObject, pyqtSignal


class CatalogSignals(QObject):
    # 目录每次变动后携带完整的电影列表快照
    movies_changed = pyqtSignal(object)


class FormSignals(QObject):
    # 新的 AddMovieValidationState 快照
    validation_changed = pyqtSignal(object)
    save_enabled_changed = pyqtSignal(bool)
