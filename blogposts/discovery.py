import os
import re
from pathlib import Path

from blogposts.config import HASH_SUFFIX_PATTERN, MARKDOWN_SUFFIX
from blogposts.errors import DirectoryReadError
from blogposts.logger import logger

HASH_SUFFIX_RE = re.compile(HASH_SUFFIX_PATTERN, re.IGNORECASE)


def _list_entries(directory):
    """Lista un directorio ordenado por nombre, de Z a A, sin distinguir mayúsculas"""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    entries.sort(key=lambda entry: entry.name.lower(), reverse=True)
    return entries


def discover_files(root, suffix=MARKDOWN_SUFFIX):
    """
    Recorre `root` recursivamente y devuelve las rutas relativas (formato
    posix) de todos los archivos Markdown. Un directorio ilegible se registra
    y se trata como vacío; el error nunca se propaga.
    """
    root = Path(root)
    results = []
    _walk(root, root, suffix, results)
    return results


def _walk(directory, root, suffix, results):
    try:
        entries = _list_entries(directory)
    except DirectoryReadError as e:
        logger.error(f"❌ {e}")
        return

    for entry in entries:
        full_path = Path(entry.path)
        try:
            if entry.is_dir(follow_symlinks=False):
                _walk(full_path, root, suffix, results)
            elif entry.is_file(follow_symlinks=False) and entry.name.endswith(suffix):
                results.append(full_path.relative_to(root).as_posix())
        except OSError as e:
            logger.warning(f"⚠️ No se pudo inspeccionar {full_path}: {e}")


def derive_slug(file_path, suffix=MARKDOWN_SUFFIX):
    """Nombre de archivo sin extensión ni hash de exportación, sin espacios sobrantes"""
    base_name = Path(file_path).name
    if base_name.endswith(suffix):
        base_name = base_name[:-len(suffix)]

    base_name = HASH_SUFFIX_RE.sub("", base_name)
    return base_name.strip()
