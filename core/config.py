# core/config.py
# Ajustes compartidos del Unificador. Los valores de entorno tienen prioridad.

import os

# =========================
# CARPETAS PRINCIPALES
# =========================
# Relativa al directorio de trabajo, no a la instalación.
LOG_DIR = os.getenv("UNIFICADOR_LOG_DIR", os.path.join("data", "logs"))
LOG_FILE = os.path.join(LOG_DIR, "unificador_cli.log")

# =========================
# CONFIGURACIÓN GLOBAL
# =========================
DEFAULT_ENCODING = "utf-8"
LOG_LEVEL = os.getenv("UNIFICADOR_LOG_LEVEL", "INFO").upper()

# =========================
# SERVIDOR DE PROCESAMIENTO
# =========================
SERVER_URL = os.getenv("UNIFICADOR_SERVER_URL", "http://127.0.0.1:5000")
SERVICIOS = ("separador", "corrector")

# =========================
# DIVISIÓN DE PÁGINAS
# =========================
OPENING_DELIMITER = "{{{"
CLOSING_DELIMITER = "}}}"
REFERENCE_OPEN = "[["
REFERENCE_CLOSE = "]]"

FOLDER_SUFFIX = "_paginas"
DISAMBIGUATOR_MIN = 1000
DISAMBIGUATOR_MAX = 9999
PAGE_EXTENSION = ".md"
