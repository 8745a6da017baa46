import pytest


@pytest.fixture
def posts_dir(tmp_path):
    """
    Directorio de posts con:
    - un post con front-matter completo
    - un post sin title ni date
    - un post exportado de Notion (con hash) dentro de un subdirectorio
    - un archivo que no es Markdown
    """
    root = tmp_path / "content" / "posts"
    root.mkdir(parents=True)

    (root / "hello-world.md").write_text(
        "---\ntitle: Hello World\ndate: 2024-01-15\ntags: [intro]\n---\n\n# Hello\n\nFirst *post*.\n",
        encoding="utf-8",
    )
    (root / "my-first-post.md").write_text("Just some **text**.\n", encoding="utf-8")

    notes = root / "notes"
    notes.mkdir()
    (notes / "Weekly Notes 0123456789abcdef0123456789abcdef.md").write_text(
        "---\ndate: 2023-12-31\n---\nNotes body\n",
        encoding="utf-8",
    )

    (root / "image.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    return root
