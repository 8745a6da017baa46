from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Post:
    """Post ya parseado y renderizado. No se modifica tras construirse."""
    slug: str
    title: str
    date: str  # YYYY-MM-DD
    body: str  # HTML
    metadata: Dict[str, Any] = field(default_factory=dict)
    path: Optional[Path] = None


@dataclass(frozen=True)
class PostResult:
    """Resultado de cargar un slug: contiene el post o el error, nunca ambos."""
    slug: str
    post: Optional[Post] = None
    error: Optional[Exception] = None

    def __post_init__(self):
        if (self.post is None) == (self.error is None):
            raise ValueError(f"PostResult de '{self.slug}' necesita un post o un error, no ambos ni ninguno")

    @property
    def ok(self) -> bool:
        return self.error is None
