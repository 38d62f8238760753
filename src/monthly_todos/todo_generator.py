import os
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from monthly_todos.calendar_days import MonthRequest

DEFAULT_PATH_ENV = "TODOS_DEFAULT_PATH"
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

HEADER_TEMPLATE = "header.md"
# ISO weekday (Monday=1 .. Sunday=7) -> template name
WEEKDAY_TEMPLATES = {
    1: "1.md",
    2: "2.md",
    3: "3.md",
    4: "4.md",
    5: "5.md",
    6: "6.md",
    7: "7.md",
}


def todos_filename(year, month):
    return f"TODOS - {year:04d}{month:02d}.md"


def resolve_output_dir(path=None, environ=None, default=None):
    """Pick the output directory.

    An explicit ``path`` wins, then the ``TODOS_DEFAULT_PATH`` environment
    setting, then ``default`` (the configured ``output_dir``), and finally the
    current working directory. Empty values count as unset.
    """
    if environ is None:
        environ = os.environ

    chosen = path or environ.get(DEFAULT_PATH_ENV) or default
    if not chosen:
        return Path.cwd()
    return Path(os.path.expanduser(os.path.expandvars(str(chosen))))


def resolve_output_path(request, environ=None, default=None):
    directory = resolve_output_dir(request.path, environ=environ, default=default)
    return directory / todos_filename(request.year, request.month)


class TodoGenerator:
    def __init__(self, template_dir=None):
        if template_dir:
            self.template_dir = Path(os.path.expanduser(os.path.expandvars(str(template_dir))))
        else:
            self.template_dir = DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render(self, template_key, **variables):
        return self.env.get_template(template_key).render(**variables)

    def render_document(self, request: MonthRequest) -> str:
        parts = [self.render(HEADER_TEMPLATE, YYYYMM=request.yyyymm)]
        for day in request.get_days():
            template_key = WEEKDAY_TEMPLATES[day.isoweekday()]
            yyyymmdd = f"{day.year:04d}{day.month:02d}{day.day:02d}"
            parts.append(self.render(template_key, YYYYMMDD=yyyymmdd))
            parts.append("\n")
        return "".join(parts)

    def generate_file(self, request: MonthRequest, environ=None, default_dir=None) -> Path:
        path = resolve_output_path(request, environ=environ, default=default_dir)
        # render before touching the filesystem so template errors leave nothing behind
        content = self.render_document(request)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        print(f"Generated TODOS file: {path}")
        return path
