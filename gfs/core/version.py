"""GFS - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(engine, drivers, settings, tools) and must not have side effects.
"""

APP_NAME = "GoldenFractalSvg"
APP_SHORT = "GFS"

APP_VERSION = "0.1.0"

# Proporción áurea. Todos los drivers la usan como precondición (ancho/alto <= PHI).
PHI = 1.61803398875

# Profundidad usada cuando se pide una <= 0.
DEFAULT_DEPTH = 5

# Defaults del documento host (en px), mismos que la demo original.
# NOTE: el nodo inicial se achica `DEFAULT_MARGIN_PX` para que el trazo no se corte.
DEFAULT_CANVAS_PX = (400.0, 250.0)
DEFAULT_MARGIN_PX = 4.0

# Loop de la demo (viewer): ping-pong 1..DEFAULT_MAX_DEPTH cada DEFAULT_INTERVAL_MS.
DEFAULT_INTERVAL_MS = 300
DEFAULT_MAX_DEPTH = 10
