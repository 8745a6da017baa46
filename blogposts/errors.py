class PostLoaderError(Exception):
    """Error base del cargador de posts"""


class DirectoryReadError(PostLoaderError):
    """No se pudo listar un directorio. Se registra y se trata como vacío."""

    def __init__(self, directory, cause):
        self.directory = directory
        self.cause = cause
        super().__init__(f"No se pudo leer el directorio {directory}: {cause}")


class PostNotFoundError(PostLoaderError):
    def __init__(self, slug):
        self.slug = slug
        super().__init__(f"No se encontró el post: {slug}")


class PostReadError(PostLoaderError):
    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"No se pudo leer el post {path}: {cause}")


class PostParseError(PostLoaderError):
    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Front-matter inválido en {path}: {cause}")
