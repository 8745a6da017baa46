from pathlib import Path
from typing import List

from blogposts.config import MARKDOWN_SUFFIX, POSTS_DIR, PREFIX_FALLBACK
from blogposts.discovery import derive_slug, discover_files
from blogposts.errors import PostNotFoundError
from blogposts.logger import logger
from blogposts.models import Post, PostResult
from blogposts.parser import PostParser


class PostLoader:
    """
    Carga los posts Markdown de un directorio. No guarda estado entre
    llamadas: cada operación vuelve a leer el sistema de archivos.
    """

    def __init__(self, root=POSTS_DIR, prefix_fallback=PREFIX_FALLBACK,
                 suffix=MARKDOWN_SUFFIX, parser=None):
        self.root = Path(root)
        self.prefix_fallback = prefix_fallback
        self.suffix = suffix
        self.parser = parser or PostParser()

    def discover(self) -> List[str]:
        return discover_files(self.root, self.suffix)

    def _inside_root(self, path):
        # Un slug absoluto o con ".." no puede salir de root
        return path.resolve().is_relative_to(self.root.resolve())

    def resolve(self, slug) -> Path:
        """
        Busca el archivo de un slug:
        1. Ruta directa root/<slug>.md
        2. Archivo cuyo slug derivado (sin hash) coincide exactamente
        3. Si prefix_fallback está activo, primer archivo cuyo nombre empieza por el slug
        """
        direct = self.root / f"{slug}{self.suffix}"
        if direct.is_file() and self._inside_root(direct):
            return direct

        all_files = self.discover()

        for file in all_files:
            if derive_slug(file, self.suffix) == slug:
                return self.root / file

        # Heurística débil: depende del orden de recorrido
        if self.prefix_fallback:
            for file in all_files:
                if Path(file).name.startswith(slug):
                    logger.warning(f"⚠️ '{slug}' resuelto por prefijo a {file}")
                    return self.root / file

        raise PostNotFoundError(slug)

    def get_post(self, slug) -> Post:
        return self.parser.parse(self.resolve(slug), slug)

    def list_slugs(self) -> List[str]:
        return [derive_slug(file, self.suffix) for file in self.discover()]

    def load_posts(self) -> List[PostResult]:
        """Un resultado por slug; los fallos se registran pero no se lanzan"""
        results = []
        for slug in self.list_slugs():
            try:
                results.append(PostResult(slug=slug, post=self.get_post(slug)))
            except Exception as e:
                logger.error(f"❌ Error cargando el post '{slug}': {e}")
                results.append(PostResult(slug=slug, error=e))
        return results

    def list_posts(self, newest_first=False) -> List[Post]:
        posts = [result.post for result in self.load_posts() if result.ok]
        if newest_first:
            # Ordenar por fecha (reciente primero)
            posts.sort(key=lambda post: post.date, reverse=True)
        return posts


def get_post(slug) -> Post:
    return PostLoader().get_post(slug)


def get_posts() -> List[Post]:
    return PostLoader().list_posts()


def get_slugs() -> List[str]:
    return PostLoader().list_slugs()
