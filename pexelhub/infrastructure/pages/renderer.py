from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

PAGES_DIR = Path(__file__).resolve().parent
STATIC_DIR = PAGES_DIR / "static"


@dataclass(slots=True)
class PageRenderer:
    base_path: Path
    env: Environment
    app_name: str = "PexelHub"

    @classmethod
    def create_default(cls) -> PageRenderer:
        base = PAGES_DIR / "templates"
        env = Environment(
            loader=FileSystemLoader(str(base)),
            autoescape=select_autoescape(["html", "xml", "j2"]),
            enable_async=False,
        )
        return cls(base_path=base, env=env)

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        ctx = {"app": {"name": self.app_name}, **context}
        layout = self.env.get_template("_layout.html.j2")
        inner = self.env.get_template(template_name).render(ctx)
        return layout.render({**ctx, "content": inner})
