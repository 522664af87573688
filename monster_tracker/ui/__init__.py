# SPDX-License-Identifier: MIT
"""
Qt user interface components for the tracker application.
"""

from .main_window import MainWindow, QtDialogService  # noqa: F401
