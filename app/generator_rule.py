from pathlib import Path
from jinja2 import Environment, FileSystemLoader

from schema_resume import Resume

_CSS_PATH = Path(__file__).parent / "static" / "style.css"

# Field values go out verbatim: markup inside them is not escaped.
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=False, trim_blocks=True, lstrip_blocks=True)

# loaded once so render() itself touches no files
_TEMPLATE = env.get_template("resume.html")
_CSS = _CSS_PATH.read_text(encoding="utf-8")


def render(resume: Resume) -> str:
    """Render résumé → standalone HTML with the stylesheet embedded."""
    return _TEMPLATE.render(r=resume, c=resume.contact_info, inline_css=_CSS)
