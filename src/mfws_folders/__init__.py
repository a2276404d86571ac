"""Display names, MFWS view paths and ordering for M-Files folder listings."""

__version__ = "0.1.0"
