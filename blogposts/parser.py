import os
from datetime import date, datetime, timezone
from pathlib import Path

import frontmatter
import markdown
import yaml

from blogposts.config import MARKDOWN_EXTENSIONS
from blogposts.errors import PostParseError, PostReadError
from blogposts.models import Post

DATE_FORMAT = "%Y-%m-%d"


def title_from_slug(slug):
    """'my-first-post' -> 'My First Post'"""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def format_date(value):
    if isinstance(value, (date, datetime)):
        return value.strftime(DATE_FORMAT)
    return str(value)


def creation_date(path):
    """
    Fecha de creación del archivo en UTC. Si el sistema no la expone
    (st_birthtime no existe en muchos Linux), se usa la fecha actual.
    """
    try:
        stats = os.stat(path)
        birthtime = stats.st_birthtime
    except (OSError, AttributeError):
        return datetime.now(timezone.utc).strftime(DATE_FORMAT)
    return datetime.fromtimestamp(birthtime, tz=timezone.utc).strftime(DATE_FORMAT)


class PostParser:
    def __init__(self, extensions=None):
        if extensions is None:
            extensions = MARKDOWN_EXTENSIONS
        self.md = markdown.Markdown(extensions=extensions)

    def read(self, path):
        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PostReadError(path, e) from e

    def render(self, content):
        try:
            return self.md.convert(content)
        finally:
            self.md.reset()

    def parse(self, path, slug):
        path = Path(path)
        raw_md = self.read(path)

        try:
            post = frontmatter.loads(raw_md)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            raise PostParseError(path, e) from e
        metadata = post.metadata

        # Fallbacks
        date_value = metadata.get("date")
        date_str = format_date(date_value) if date_value else creation_date(path)

        title = metadata.get("title")
        title = str(title) if title else title_from_slug(slug)

        return Post(
            slug=slug,
            title=title,
            date=date_str,
            body=self.render(post.content),
            metadata=dict(metadata),
            path=path,
        )
