# Gloss - declarative 2D vector graphics
#
# Core modules are toolkit independent. The PySide6 backend lives
# in gloss.qt.
