# SPDX-License-Identifier: MIT
"""
Desktop monster tracker.

`monster_tracker.core` hosts the record store, the interaction controller and
the configuration, while `monster_tracker.ui` contains the Qt widgets. The
`monster_tracker.main` module is the entry point that wires everything
together.
"""

__all__ = ["main"]
