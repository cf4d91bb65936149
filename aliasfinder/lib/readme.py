from pathlib import Path


def root() -> str:
    """Load the package README.md, which doubles as the usage text."""
    here = Path(__file__).parent.parent
    readme = here / "README.md"
    if readme.exists():
        return readme.read_text()
    return ""
