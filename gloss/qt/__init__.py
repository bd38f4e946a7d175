# PySide6 backend for Gloss: drawing device, window and events.
