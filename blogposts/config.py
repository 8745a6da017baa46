import os

# --- CONFIGURACIÓN ---
# Todo se puede sobreescribir con variables de entorno

POSTS_DIR = os.getenv("POSTS_DIR", "content/posts")
MARKDOWN_SUFFIX = os.getenv("MARKDOWN_SUFFIX", ".md")

# Extensiones estándar de python-markdown, separadas por comas
MARKDOWN_EXTENSIONS = [
    ext.strip()
    for ext in os.getenv("MARKDOWN_EXTENSIONS", "extra").split(",")
    if ext.strip()
]

# Búsqueda por prefijo del nombre de archivo cuando el slug no coincide
PREFIX_FALLBACK = os.getenv("POSTS_PREFIX_FALLBACK", "false").lower() == "true"

# Notion y otros exportadores añaden un hash hexadecimal al final del nombre
HASH_SUFFIX_PATTERN = r"\s+[0-9a-f]{28,36}$"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")
